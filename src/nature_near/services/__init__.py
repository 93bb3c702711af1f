"""
Shared utilities.

- http.py     - requests session with retry adapter and default timeout
- throttle.py - process-wide cooldown for rate-limited endpoints
"""
