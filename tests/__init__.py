"""
Test Suite for Money Calculator

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: End-to-end CLI and configuration tests

Test Categories:
- Core utilities (currency, errors, money, config)
- Interactive menu
"""
