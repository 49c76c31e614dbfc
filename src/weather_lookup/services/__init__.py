"""
Shared utilities for datasources.

- http.py - requests session with retry/backoff and a default timeout
"""
