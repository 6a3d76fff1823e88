"""
Core domain for Kinship.

Provides the service pipeline shared by every business operation:
payload validation, named permission checks, scoped fetches, error
classification and structured logging.
"""
