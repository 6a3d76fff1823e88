from types import SimpleNamespace

from django.test import TestCase

from apps.accounts.models import Vault
from apps.accounts.permissions import (
    AccountPermissions,
    author_belongs_to_account,
    author_can_edit_vault,
    author_can_manage_vault,
    author_can_view_vault,
    author_is_account_administrator,
    has_vault_permission,
)
from apps.core.permissions import permission_registry

from .helpers import ServiceTestMixin


class AccountPermissionsTestCase(ServiceTestMixin, TestCase):
    """Test account and vault permission checks."""

    def setUp(self):
        self.regis = self.create_user()
        self.vault = self.create_vault(self.regis.account)

    def context(self, account=None, vault=None):
        return SimpleNamespace(account=account or self.regis.account, vault=vault or self.vault)

    def test_checks_are_registered(self):
        """Test every account permission is known to the registry."""
        for name in [
            AccountPermissions.BELONG_TO_ACCOUNT,
            AccountPermissions.ACCOUNT_ADMINISTRATOR,
            AccountPermissions.VAULT_VIEWER,
            AccountPermissions.VAULT_EDITOR,
            AccountPermissions.VAULT_MANAGER,
        ]:
            self.assertTrue(permission_registry.is_registered(name), name)

    def test_belongs_to_account(self):
        """Test account membership check."""
        self.assertTrue(author_belongs_to_account(self.regis, self.context()))
        self.assertFalse(author_belongs_to_account(self.regis, self.context(account=self.create_account())))
        self.assertFalse(author_belongs_to_account(None, self.context()))

    def test_account_administrator(self):
        """Test administrator check."""
        member = self.create_user(account=self.regis.account, administrator=False)

        self.assertTrue(author_is_account_administrator(self.regis, self.context()))
        self.assertFalse(author_is_account_administrator(member, self.context()))

    def test_vault_levels_are_ordered(self):
        """Test a stronger level satisfies a weaker requirement."""
        self.set_permission_in_vault(self.regis, Vault.PERMISSION_EDIT, self.vault)
        context = self.context()

        self.assertTrue(author_can_view_vault(self.regis, context))
        self.assertTrue(author_can_edit_vault(self.regis, context))
        self.assertFalse(author_can_manage_vault(self.regis, context))

    def test_no_vault_permission(self):
        """Test users without a row in the vault have no access."""
        self.assertFalse(has_vault_permission(self.regis, self.vault, Vault.PERMISSION_VIEW))
        self.assertFalse(has_vault_permission(self.regis, None, Vault.PERMISSION_VIEW))

    def test_vault_of_another_account(self):
        """Test a permission row never grants access across accounts."""
        other_vault = self.create_vault(self.create_account())
        self.set_permission_in_vault(self.regis, Vault.PERMISSION_MANAGE, other_vault)

        self.assertFalse(has_vault_permission(self.regis, other_vault, Vault.PERMISSION_VIEW))
