"""Workly shift-attendance package.

Feature modules (shifts, attendance, hours, status, reports, ...) hold the
pure computation engine and its SOLID service/repository layers; a thin
Flask controller layer exposes them over HTTP.
"""
