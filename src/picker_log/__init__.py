"""Picker Log package.

Work-log core for seasonal piece-rate and hourly workers: pay calculation,
a local entry repository over a key-value store, and period/day aggregation.
Organized by feature modules (entries, payroll, calendar) with a thin Flask
controller layer on top.
"""
