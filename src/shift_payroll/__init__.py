"""Shift payroll package.

Organized by feature modules (contracts, shifts, payroll, reports, ...) with
Protocol repositories, MySQL adapters and plain service classes on top.
"""
