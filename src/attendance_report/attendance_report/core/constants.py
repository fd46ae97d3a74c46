"""Constants and defaults for the attendance report layout.

Note: Keep constants here to avoid magic numbers spread across code.
Coordinates are PDF points measured from the top-left corner of the page.
"""

MARGIN = 20
ROW_HEIGHT = 12
# Text baseline sits this far below the top edge of its band.
ROW_BASELINE_OFFSET = 9

TITLE_Y = 30
TITLE_FONT_SIZE = 18
TABLE_TOP = 70
CONTINUATION_TOP = 30
PAGE_BOTTOM = 250

HEADER_FONT_SIZE = 12
BODY_FONT_SIZE = 12
CELL_INSET = 5

COLUMN_RATIOS = (0.5, 0.25, 0.25)

NAME_MAX_LENGTH = 35
NAME_KEEP_LENGTH = 32
ELLIPSIS = "..."

HEADER_FILL = (52, 152, 219)
HEADER_TEXT = (255, 255, 255)
BODY_TEXT = (0, 0, 0)
STRIPE_FILL = (245, 245, 245)
BORDER_COLOR = (200, 200, 200)
BORDER_WIDTH = 0.1

SUMMARY_GAP = 20
SUMMARY_RULE_WIDTH = 0.5
SUMMARY_HEADING_GAP = 15
SUMMARY_HEADING_FONT_SIZE = 14
SUMMARY_FONT_SIZE = 11
SUMMARY_LINE_GAP = 10
SUMMARY_LABEL_INSET = 10
SUMMARY_VALUE_INSET = 60

PRESENT_LABEL = "Present"
TITLE_TEMPLATE = "Attendance Records for {label}"
FILENAME_PREFIX = "attendance-report"
FILENAME_EXTENSION = ".pdf"
