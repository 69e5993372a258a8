"""Geo Attendance package.

This package is organized by feature modules (geo, attendance, settings,
students, analytics) with a thin Flask controller layer and service/repository
layers behind it.
"""
