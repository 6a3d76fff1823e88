"""
Account services.

Operations on tenants, vaults and the reference data an account owns.
"""

from .create_account import CreateAccount
from .manage_address_types import CreateAddressType, DestroyAddressType, UpdateAddressType
from .manage_pronouns import CreatePronoun, DestroyPronoun, UpdatePronoun
from .manage_relationship_types import (
    CreateRelationshipGroupType,
    CreateRelationshipType,
    DestroyRelationshipGroupType,
    DestroyRelationshipType,
    UpdateRelationshipGroupType,
    UpdateRelationshipType,
)
from .manage_vaults import CreateVault, GrantVaultAccess

__all__ = [
    'CreateAccount',
    'CreateAddressType',
    'CreatePronoun',
    'CreateRelationshipGroupType',
    'CreateRelationshipType',
    'CreateVault',
    'DestroyAddressType',
    'DestroyPronoun',
    'DestroyRelationshipGroupType',
    'DestroyRelationshipType',
    'GrantVaultAccess',
    'UpdateAddressType',
    'UpdatePronoun',
    'UpdateRelationshipGroupType',
    'UpdateRelationshipType',
]
