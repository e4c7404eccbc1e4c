"""
Shared utilities: logging, error taxonomy and small text helpers.
"""
