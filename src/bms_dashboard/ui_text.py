# This file stores copy blocks for headings, card titles, and empty-state messages.
# It exists so wording stays consistent between the header, the metric grid, and the footer.

from __future__ import annotations

APP_TITLE = "BMS Dashboard"
APP_SUBTITLE = "Business Metrics & Analytics"

TREND_SECTION_TITLE = "Trend Analysis"
PERFORMANCE_CHART_TITLE = "Performance Overview"
CONVERSION_CHART_TITLE = "Conversion Rate & Buy Value"
TREND_SAMPLE_NOTE = (
    "Trend lines are illustrative: the statistics tables only keep running totals per time frame."
)

EMPTY_TREND = "No trend points available for this time frame."
EMPTY_METRICS = (
    "Metrics could not be loaded from the datastore. Showing zero values until the next refresh."
)
LOADING_METRICS = "Loading metrics..."
LOADING_TREND = "Loading trend data..."

FOOTER_LIVE = "Live Data"
