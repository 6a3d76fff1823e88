"""
Contact services.

Operations on contacts and their attributes, always scoped to a vault.
"""

from .manage_contact_addresses import (
    CreateContactAddress,
    DestroyContactAddress,
    UpdateContactAddress,
)
from .manage_contact_pronoun import RemoveContactPronoun, SetContactPronoun
from .manage_contacts import CreateContact, DestroyContact, UpdateContact

__all__ = [
    'CreateContact',
    'CreateContactAddress',
    'DestroyContact',
    'DestroyContactAddress',
    'RemoveContactPronoun',
    'SetContactPronoun',
    'UpdateContact',
    'UpdateContactAddress',
]
