"""
Celery tasks for audit logging.

Audit entries are written outside the request that produced them; the
service that dispatched the message never waits for, or learns about,
the outcome.
"""

import logging
from typing import Any, Dict

from celery import shared_task

from .models import AuditLog

logger = logging.getLogger(__name__)


@shared_task(name='audit.create_audit_log', ignore_result=True)
def create_audit_log(audit_log: Dict[str, Any]) -> None:
    """
    Persist an audit log entry.

    Args:
        audit_log: Dict with account_id, author_id, author_name,
                   action_name and objects (JSON string)
    """
    from django.contrib.auth import get_user_model
    User = get_user_model()

    # The author may have been deleted since the action was dispatched
    author_id = audit_log.get('author_id')
    if author_id is not None and not User.objects.filter(pk=author_id).exists():
        author_id = None

    entry = AuditLog.objects.create(
        account_id=audit_log['account_id'],
        author_id=author_id,
        author_name=audit_log['author_name'],
        action_name=audit_log['action_name'],
        objects_json=audit_log.get('objects') or '{}',
    )

    logger.info(f"Audit log {entry.id} recorded: {entry.action_name} by {entry.author_name}")
