"""
Named permission checks for service operations.

Features:
- Registry of predicates keyed by name
- Apps register their own checks at startup
- Services declare the names they require

Usage:
    from apps.core.permissions import permission_registry

    @permission_registry.register('author_must_be_account_administrator')
    def author_is_administrator(author, context):
        return author.is_account_administrator

    permission_registry.enforce(['author_must_be_account_administrator'], author, context)
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

from django.core.exceptions import ImproperlyConfigured

from .exceptions import NotEnoughPermission
from .logging_config import get_logger

logger = get_logger(__name__)

Predicate = Callable[[Any, Any], bool]


class PermissionRegistry:
    """
    Registry mapping permission names to predicates over (author, context).

    A predicate returns True when the author is allowed to proceed.
    """

    def __init__(self):
        self._checks: Dict[str, Predicate] = {}

    def register(self, name: str, predicate: Optional[Predicate] = None):
        """
        Register a predicate under ``name``.

        Can be called directly or used as a decorator.
        """
        def decorator(func: Predicate) -> Predicate:
            self._checks[name] = func
            return func

        if predicate is not None:
            return decorator(predicate)
        return decorator

    def unregister(self, name: str) -> None:
        """Remove a check (mostly useful in tests)."""
        self._checks.pop(name, None)

    def is_registered(self, name: str) -> bool:
        return name in self._checks

    def names(self) -> List[str]:
        return sorted(self._checks)

    def check(self, name: str, author, context) -> bool:
        """
        Evaluate a single named check.

        Raises:
            ImproperlyConfigured: If no check is registered under ``name``
        """
        try:
            predicate = self._checks[name]
        except KeyError:
            raise ImproperlyConfigured(f"Unknown permission check: {name}")
        return bool(predicate(author, context))

    def enforce(self, names: Iterable[str], author, context) -> None:
        """
        Evaluate checks in order, failing on the first one that does not hold.

        Raises:
            NotEnoughPermission: Naming the failed check
        """
        for name in names:
            if not self.check(name, author, context):
                logger.warning(
                    'Permission check failed',
                    check=name,
                    author_id=getattr(author, 'id', None),
                )
                raise NotEnoughPermission(name)


# Global registry instance
permission_registry = PermissionRegistry()
