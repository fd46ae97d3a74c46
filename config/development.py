import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Where exported PDFs are also written; unset keeps reports in memory only
REPORT_OUTPUT_DIR = os.getenv("REPORT_OUTPUT_DIR", "reports")

REPORT_TITLE_TEMPLATE = os.getenv("REPORT_TITLE_TEMPLATE", "Attendance Records for {label}")
