# This package contains the Streamlit BMS dashboard: chat, funnel, and spam metrics by time frame.
# The modules separate data access, metric arithmetic, UI components, and page sections.

__all__ = ["app"]
