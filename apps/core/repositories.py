"""
Scoped data access.

Every cross-entity fetch in a service goes through ``get_scoped`` so
that tenant isolation is enforced where data is read, not only where
permissions are checked. A row that exists under another parent is
reported exactly like a row that does not exist.
"""

from typing import Any, Union

from django.core.exceptions import ImproperlyConfigured
from django.db.models import Model, QuerySet


def get_scoped(source: Union[type, QuerySet], pk: Any, **scope) -> Model:
    """
    Fetch an entity by primary key, constrained to its parent(s).

    Args:
        source: Model class or queryset to read from
        pk: Primary key of the entity
        **scope: Parent foreign keys the entity must match
                 (e.g. ``account_id=1``)

    Returns:
        The matching model instance

    Raises:
        Model.DoesNotExist: If no entity with that id exists under the scope
        ImproperlyConfigured: If no scope was given
    """
    if not scope:
        raise ImproperlyConfigured("Scoped fetches require at least one parent filter")

    queryset = source if isinstance(source, QuerySet) else source._default_manager.all()
    return queryset.filter(**scope).get(pk=pk)
