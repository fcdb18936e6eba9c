"""Column names shared by the DataFrame readers."""

COLUMNS = (
    "sid",
    "ticker",
    "page_views",
    "week_percent_change",
    "month_percent_change",
)

NUMERIC_COLUMNS = COLUMNS[2:]
