"""
Utils package - helpers shared by the directory clients.

Contains:
- HTTP transport over httpx
"""

from verify_directory.utils.http import HttpClient

__all__ = ["HttpClient"]
