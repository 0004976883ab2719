"""Warden - authentication service issuing and renewing session tokens.

Layers:
- application: token lifecycle orchestration (login, refresh)
- presentation: HTTP API exposing the application services

Generic auth building blocks live in warden_auth; configuration in
warden_config.
"""
