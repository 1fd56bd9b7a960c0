"""Lecture Attendance package.

Organized by feature modules (students, attendance, sessions, ...) with a thin
Flask controller layer over service/repository layers and a pooled MySQL gateway.
"""
