"""
Fire-and-forget audit dispatch.

Usage:
    from apps.audit.dispatch import dispatch_audit_log

    dispatch_audit_log(
        account_id=author.account_id,
        author_id=author.id,
        author_name=author.name,
        action_name='contact_created',
        objects={'contact_name': contact.name},
    )

The message is handed to the queue only after the surrounding
transaction commits, and is dropped if it rolls back. Failures to reach
the broker are logged and never propagate to the caller.
"""

import json
from typing import Any, Dict, Optional

from django.core.serializers.json import DjangoJSONEncoder
from django.db import transaction

from apps.core.logging_config import get_logger

from .tasks import create_audit_log

logger = get_logger(__name__)


def build_audit_payload(
    account_id: int,
    author_id: Optional[int],
    author_name: str,
    action_name: str,
    objects: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Build the queue message for one audited action."""
    return {
        'account_id': account_id,
        'author_id': author_id,
        'author_name': author_name,
        'action_name': action_name,
        'objects': json.dumps(objects or {}, cls=DjangoJSONEncoder),
    }


def send_audit_log(payload: Dict[str, Any]) -> bool:
    """
    Hand a payload to the audit queue.

    Returns:
        True if the message was accepted by the broker
    """
    try:
        create_audit_log.delay(payload)
    except Exception as e:
        logger.error(
            'Audit log dispatch failed',
            exc_info=e,
            action_name=payload.get('action_name'),
            account_id=payload.get('account_id'),
        )
        return False

    logger.debug(
        'Audit log dispatched',
        action_name=payload.get('action_name'),
        account_id=payload.get('account_id'),
    )
    return True


def dispatch_audit_log(
    account_id: int,
    author_id: Optional[int],
    author_name: str,
    action_name: str,
    objects: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Schedule an audit message for after the current transaction commits.

    Returns:
        The payload that will be sent
    """
    payload = build_audit_payload(account_id, author_id, author_name, action_name, objects)
    transaction.on_commit(lambda: send_audit_log(payload))
    return payload
