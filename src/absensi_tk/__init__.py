"""Absensi TK package.

Kindergarten attendance register organized by feature modules (classes,
students, attendance, reports, ...) with a thin Flask controller layer on top
of service/repository layers and one in-memory application state.
"""
