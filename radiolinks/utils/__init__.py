"""
Shared utilities: configuration, logging, exceptions and error handling.
"""
