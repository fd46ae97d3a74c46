import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

REPORT_OUTPUT_DIR = os.getenv("REPORT_OUTPUT_DIR") or None

REPORT_TITLE_TEMPLATE = os.getenv("REPORT_TITLE_TEMPLATE", "Attendance Records for {label}")
