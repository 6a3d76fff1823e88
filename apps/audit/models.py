"""
Audit log storage.

Features:
- Immutable audit trail
- Author name preserved even if the user is deleted
- Serialized snapshot of what changed
"""

import json

from django.conf import settings
from django.db import models


class AuditLogQuerySet(models.QuerySet):
    """QuerySet that refuses bulk modification of audit rows."""

    def update(self, **kwargs):
        raise ValueError("Audit logs are immutable")

    def delete(self):
        raise ValueError("Audit logs cannot be deleted")


class AuditLog(models.Model):
    """
    Immutable audit log for every service action.

    Rows are written by the ``audit.create_audit_log`` task and never
    change afterwards.
    """

    account = models.ForeignKey(
        'accounts.Account',
        on_delete=models.CASCADE,
        related_name='audit_logs'
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs'
    )
    author_name = models.CharField(max_length=255)  # Preserve even if user deleted
    action_name = models.CharField(max_length=100, db_index=True)
    objects_json = models.TextField(db_column='objects', default='{}')

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = AuditLogQuerySet.as_manager()

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['account', 'created_at'], name='audit_account_created_idx'),
            models.Index(fields=['author', 'created_at'], name='audit_author_created_idx'),
        ]

    def __str__(self):
        return f"{self.author_name} {self.action_name} at {self.created_at}"

    @property
    def decoded_objects(self):
        """The snapshot payload, decoded from JSON."""
        return json.loads(self.objects_json or '{}')

    def save(self, *args, **kwargs):
        # Only allow creation, no updates
        if not self._state.adding:
            raise ValueError("Audit logs are immutable")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Audit logs cannot be deleted")
