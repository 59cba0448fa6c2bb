"""Staff Attendance package.

This package is organized by feature modules (timeledger, logs, report, sessions)
with a thin Flask controller layer over pure calculation and service layers.
"""
