# This package holds the section renderers that make up the single dashboard page.
# Keeping sections separate stops app.py from turning into a monolith.

__all__ = ["trend_analysis", "metric_grid"]
