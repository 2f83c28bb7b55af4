"""
Test Suite for A2B Cash Flow

Test Structure:
- fixtures/: Shared synthetic service data
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests

All test data is synthetic.
"""
