SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

REPORT_OUTPUT_DIR = None

REPORT_TITLE_TEMPLATE = "Attendance Records for {label}"
