"""Attendance Guard package.

Organized by feature modules (snapshots, semester, attendance, stats, ...)
with a thin Flask controller layer over service/repository layers. The
statistics engine in ``stats.engine`` is a pure function over one user
snapshot.
"""
