"""
Query interface for audit logs.

Usage:
    logs = AuditLogQuery.for_account(account.id)
    logs = AuditLogQuery.for_author(user.id, days=7)
    logs = AuditLogQuery.for_action(account.id, 'contact_created')
"""

from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.utils import timezone

from .models import AuditLog


def _cutoff(days: Optional[int]):
    if days is None:
        days = settings.AUDIT_LOG_RETENTION_DAYS
    return timezone.now() - timedelta(days=days)


class AuditLogQuery:
    """Time-windowed audit log lookups, newest first."""

    @staticmethod
    def for_account(account_id, days=None):
        """Get audit logs for an account."""
        return AuditLog.objects.filter(
            account_id=account_id,
            created_at__gte=_cutoff(days)
        )

    @staticmethod
    def for_author(author_id, days=None):
        """Get audit logs written by a user."""
        return AuditLog.objects.filter(
            author_id=author_id,
            created_at__gte=_cutoff(days)
        )

    @staticmethod
    def for_action(account_id, action_name, days=None):
        """Get audit logs for one action in an account."""
        return AuditLogQuery.for_account(account_id, days).filter(
            action_name=action_name
        )
