"""
Account and vault permission checks.

Registered with the global permission registry when the accounts app
is ready. Each check receives the author and the running service, which
exposes the resolved ``account`` and ``vault``.
"""

from apps.core.permissions import permission_registry

from .models import Vault


class AccountPermissions:
    """Centralized permission names for account operations."""

    BELONG_TO_ACCOUNT = 'author_must_belong_to_account'
    ACCOUNT_ADMINISTRATOR = 'author_must_be_account_administrator'
    VAULT_VIEWER = 'author_must_be_vault_viewer'
    VAULT_EDITOR = 'author_must_be_vault_editor'
    VAULT_MANAGER = 'author_must_be_vault_manager'


# Checks required to change an account's reference data
ADMINISTRATOR_PERMISSIONS = [
    AccountPermissions.BELONG_TO_ACCOUNT,
    AccountPermissions.ACCOUNT_ADMINISTRATOR,
]


@permission_registry.register(AccountPermissions.BELONG_TO_ACCOUNT)
def author_belongs_to_account(author, context) -> bool:
    account = getattr(context, 'account', None)
    return author is not None and account is not None and author.account_id == account.id


@permission_registry.register(AccountPermissions.ACCOUNT_ADMINISTRATOR)
def author_is_account_administrator(author, context) -> bool:
    return author_belongs_to_account(author, context) and author.is_account_administrator


def has_vault_permission(author, vault, required: int) -> bool:
    """
    Check the author's level in a vault.

    Args:
        author: User performing the action
        vault: Vault being acted on
        required: Minimum level (Vault.PERMISSION_*); lower is stronger

    Returns:
        bool: True if the author's level is at least ``required``
    """
    if author is None or vault is None:
        return False
    if author.account_id != vault.account_id:
        return False

    permission = vault.permission_for(author)
    return permission is not None and permission <= required


@permission_registry.register(AccountPermissions.VAULT_VIEWER)
def author_can_view_vault(author, context) -> bool:
    return has_vault_permission(author, getattr(context, 'vault', None), Vault.PERMISSION_VIEW)


@permission_registry.register(AccountPermissions.VAULT_EDITOR)
def author_can_edit_vault(author, context) -> bool:
    return has_vault_permission(author, getattr(context, 'vault', None), Vault.PERMISSION_EDIT)


@permission_registry.register(AccountPermissions.VAULT_MANAGER)
def author_can_manage_vault(author, context) -> bool:
    return has_vault_permission(author, getattr(context, 'vault', None), Vault.PERMISSION_MANAGE)
