"""
Core infrastructure: settings, logging, errors and the SQLite helpers.
"""
