# This package groups reusable Streamlit components used by the dashboard page.
# Sharing these helpers keeps page modules focused on which numbers to show, not how.

__all__ = ["filters", "summary_cards", "charts"]
