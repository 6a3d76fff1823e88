"""
Service layer shared by every app.
"""

from .base import AUTHOR_RULES, VAULT_RULES, BaseService, ServiceState

__all__ = ['AUTHOR_RULES', 'VAULT_RULES', 'BaseService', 'ServiceState']
