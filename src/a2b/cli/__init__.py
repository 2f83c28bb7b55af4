"""
Command Line Interface Package

Command Structure:
- a2b: Main entry point with utility commands (version, config)
- a2b cashflow: Period report, year list and chart
- a2b cards: Open receivables/payables and commissions
"""
