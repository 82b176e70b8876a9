"""Core infrastructure shared by station components.

Configuration loading, logging setup, the component registry and bundled
resource lookup.
"""
