"""
Package marker for the dashboard source tree.
`src.bms_dashboard` holds the Streamlit app; `src.common` holds settings, logging, and database helpers.
"""
