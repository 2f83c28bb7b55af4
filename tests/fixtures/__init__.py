"""
Test Fixtures and Utilities

Synthetic service records and helpers for writing services files.
All test data is synthetic and does not contain real financial information.
"""
