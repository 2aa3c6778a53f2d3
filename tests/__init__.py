"""
Tests package - test suite for the directory client.

Contains:
- unit/: Unit tests with the HTTP transport and user resolver mocked out
"""
