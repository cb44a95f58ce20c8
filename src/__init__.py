"""
Personal Ledger - Source Package

A deterministic aggregation engine for a personal income/expense ledger.
It turns a snapshot of transactions, budgets and goals into the figures a
dashboard shows: running balance, budget utilization, trends, goal
progress and an illustrative income-tax estimate.

DESIGN PRINCIPLES:
1. Same snapshot in, same numbers out
2. No I/O, no storage, no wall clock (today is always passed in)
3. One malformed row never breaks the dashboard
4. Money is fixed-point (Decimal cents), never binary floats
"""

__version__ = "1.0.0"
__author__ = "Personal Ledger Team"
