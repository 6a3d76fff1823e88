"""
Declarative payload validation for services.

A rule set maps each field to an ordered list of constraints:

    {
        'account_id': ['required', 'integer', Exists('accounts')],
        'name': ['required', 'string', 'max:255'],
        'latitude': ['nullable', 'numeric'],
    }

Supported string tags:
- required, nullable
- integer, numeric, string, boolean
- max:N
- in:a,b,c
- exists:table,column (same as Exists(table, column))

Every violated field is reported in a single ValidationError keyed by
field name. Each field stops at its first failing constraint.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from django.apps import apps
from django.core.exceptions import ImproperlyConfigured, ValidationError

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r'^-?\d+$')


# ============================================================================
# Constraint descriptors
# ============================================================================

@dataclass(frozen=True)
class Exists:
    """Remote-existence check: a row with ``column == value`` must exist in ``table``."""

    table: str
    column: str = 'id'

    @classmethod
    def parse(cls, spec: str) -> 'Exists':
        """Parse the ``table,column`` part of an ``exists:`` tag."""
        parts = [part.strip() for part in spec.split(',') if part.strip()]
        if not parts or len(parts) > 2:
            raise ImproperlyConfigured(f"Invalid exists rule: exists:{spec}")
        return cls(*parts)


Constraint = Union[str, Exists]
RuleSet = Dict[str, Sequence[Constraint]]


def model_for_table(table: str):
    """
    Resolve the installed model stored in ``table``.

    Raises:
        ImproperlyConfigured: If no installed model uses that table
    """
    for model in apps.get_models():
        if model._meta.db_table == table:
            return model
    raise ImproperlyConfigured(f"No installed model uses table '{table}'")


# ============================================================================
# Single-constraint checks
# ============================================================================

def is_blank(value: Any) -> bool:
    """Whether a payload value counts as absent (None or an empty string)."""
    return value is None or (isinstance(value, str) and value == '')


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(INTEGER_PATTERN.match(value))


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if not isinstance(value, str) or value != value.strip() or '_' in value:
        return False
    try:
        return math.isfinite(float(value))
    except ValueError:
        return False


def _is_boolean(value: Any) -> bool:
    return value in (True, False, 0, 1, '0', '1')


def _check_max(value: Any, limit: int) -> Optional[str]:
    if isinstance(value, str):
        if len(value) > limit:
            return f"Ensure this value has at most {limit} characters."
    elif _is_numeric(value) and (value if isinstance(value, int) else float(value)) > limit:
        return f"Ensure this value is less than or equal to {limit}."
    return None


def _check_exists(value: Any, descriptor: Exists) -> Optional[str]:
    model = model_for_table(descriptor.table)
    if not model._default_manager.filter(**{descriptor.column: value}).exists():
        return f"The selected {descriptor.column} is invalid."
    return None


def _check_constraint(value: Any, constraint: Constraint) -> Optional[str]:
    """
    Evaluate a single constraint against a present value.

    Returns:
        Error message, or None when the constraint holds
    """
    if isinstance(constraint, Exists):
        return _check_exists(value, constraint)

    name, _, argument = constraint.partition(':')

    if name in ('required', 'nullable'):
        return None
    if name == 'integer':
        return None if _is_integer(value) else "Enter a valid integer."
    if name == 'numeric':
        return None if _is_numeric(value) else "Enter a number."
    if name == 'string':
        return None if isinstance(value, str) else "Enter a valid string."
    if name == 'boolean':
        return None if _is_boolean(value) else "Must be either true or false."
    if name == 'max':
        try:
            limit = int(argument)
        except ValueError:
            raise ImproperlyConfigured(f"Invalid max rule: {constraint}")
        return _check_max(value, limit)
    if name == 'in':
        allowed = [choice.strip() for choice in argument.split(',') if choice.strip()]
        if not allowed:
            raise ImproperlyConfigured(f"Invalid in rule: {constraint}")
        return None if str(value) in allowed else "Select a valid choice."
    if name == 'exists':
        return _check_exists(value, Exists.parse(argument))

    raise ImproperlyConfigured(f"Unknown validation rule: {constraint}")


# ============================================================================
# Payload validation
# ============================================================================

def validate_field(data: Dict[str, Any], field: str, constraints: Sequence[Constraint]) -> List[str]:
    """
    Validate one field of the payload.

    Args:
        data: Full payload
        field: Field name
        constraints: Ordered constraint list

    Returns:
        List with the first error for this field (empty if valid)
    """
    value = data.get(field)
    if is_blank(value):
        if 'required' in constraints:
            return ["This field is required."]
        return []

    for constraint in constraints:
        error = _check_constraint(value, constraint)
        if error:
            return [error]

    return []


def validate_payload(data: Dict[str, Any], rules: RuleSet) -> Dict[str, Any]:
    """
    Validate a payload against a rule set.

    Args:
        data: Mapping of field name to value
        rules: Mapping of field name to ordered constraint list

    Returns:
        The payload, unchanged

    Raises:
        ValidationError: With one entry per violated field
    """
    if not isinstance(data, dict):
        raise ValidationError("Payload must be a mapping of field names to values.")

    errors: Dict[str, List[str]] = {}
    for field, constraints in rules.items():
        field_errors = validate_field(data, field, constraints)
        if field_errors:
            errors[field] = field_errors

    if errors:
        logger.debug(f"Payload rejected on fields: {', '.join(sorted(errors))}")
        raise ValidationError(errors)

    return data
