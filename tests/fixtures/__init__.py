# Shared fixtures, imported by tests/conftest.py
