"""
Tests Package - Unit Tests

Test structure:
- tests/conftest.py - Shared fixtures (Apigee payloads, fake client, settings)
- tests/test_*.py - One module per backup component

The Apigee management API is never reached; clients and HTTP sessions are mocked.
"""
