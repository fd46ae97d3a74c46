"""Attendance Report package.

Organized by feature modules (attendance, report) with a thin Flask
controller layer over plain service functions.
"""
