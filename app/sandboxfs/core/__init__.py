"""Core configuration and path helpers for sandboxfs."""
