"""
Account models for Kinship - tenants, users, vaults and reference data.

Architecture:
- Account: Top-level tenant (complete isolation)
- User: Member of exactly one account
- Vault: Permissioned namespace of contacts inside an account
- UserVault: A user's permission level in a vault
- AddressType, Pronoun, RelationshipGroupType, RelationshipType:
  account-scoped reference data
"""

from django.contrib.auth.models import AbstractUser
from django.db import models

from apps.core.models import BaseModel


class Account(BaseModel):
    """Top-level tenant boundary."""

    class Meta:
        db_table = 'accounts'

    def __str__(self):
        return f"Account {self.pk}"


class User(AbstractUser):
    """A person who can sign in and act on an account's data."""

    account = models.ForeignKey(
        Account,
        on_delete=models.CASCADE,
        related_name='users'
    )
    is_account_administrator = models.BooleanField(default=False)

    class Meta:
        db_table = 'users'

    @property
    def name(self) -> str:
        return self.get_full_name() or self.username


class Vault(BaseModel):
    """Namespace of contacts with per-user permissions."""

    # Lower value means more power
    PERMISSION_MANAGE = 100
    PERMISSION_EDIT = 200
    PERMISSION_VIEW = 300

    PERMISSION_CHOICES = [
        (PERMISSION_MANAGE, 'Manage'),
        (PERMISSION_EDIT, 'Edit'),
        (PERMISSION_VIEW, 'View'),
    ]

    account = models.ForeignKey(
        Account,
        on_delete=models.CASCADE,
        related_name='vaults'
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'vaults'

    def __str__(self):
        return self.name

    def permission_for(self, user):
        """Get the user's permission level in this vault, or None."""
        access = self.user_permissions.filter(user=user).first()
        return access.permission if access else None


class UserVault(models.Model):
    """Permission of a user inside a vault."""

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='vault_permissions'
    )
    vault = models.ForeignKey(
        Vault,
        on_delete=models.CASCADE,
        related_name='user_permissions'
    )
    permission = models.IntegerField(choices=Vault.PERMISSION_CHOICES)

    class Meta:
        db_table = 'user_vault'
        unique_together = [('user', 'vault')]

    def __str__(self):
        return f"{self.user} in {self.vault} ({self.get_permission_display()})"


class AddressType(BaseModel):
    """Kind of postal address (home, work...)."""

    account = models.ForeignKey(
        Account,
        on_delete=models.CASCADE,
        related_name='address_types'
    )
    name = models.CharField(max_length=255)

    class Meta:
        db_table = 'address_types'

    def __str__(self):
        return self.name


class Pronoun(BaseModel):
    account = models.ForeignKey(
        Account,
        on_delete=models.CASCADE,
        related_name='pronouns'
    )
    name = models.CharField(max_length=255)

    class Meta:
        db_table = 'pronouns'

    def __str__(self):
        return self.name


class RelationshipGroupType(BaseModel):
    """Category of relationships (love, family, work...)."""

    account = models.ForeignKey(
        Account,
        on_delete=models.CASCADE,
        related_name='relationship_group_types'
    )
    name = models.CharField(max_length=255)

    class Meta:
        db_table = 'relationship_group_types'

    def __str__(self):
        return self.name


class RelationshipType(BaseModel):
    """A relationship between two contacts, seen from both sides."""

    relationship_group_type = models.ForeignKey(
        RelationshipGroupType,
        on_delete=models.CASCADE,
        related_name='types'
    )
    name = models.CharField(max_length=255)
    name_reverse_relationship = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        db_table = 'relationship_types'

    def __str__(self):
        return self.name
