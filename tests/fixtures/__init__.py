"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_data.json: Small participant collection in the served format
    - sample_config.yaml: Sample configuration for testing

Usage:
    Reach them through the pytest fixtures in tests/conftest.py.
"""
