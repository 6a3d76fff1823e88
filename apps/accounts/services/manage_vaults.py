from apps.core.repositories import get_scoped
from apps.core.services import AUTHOR_RULES, VAULT_RULES, BaseService
from apps.core.validation import Exists

from ..models import User, UserVault, Vault
from ..permissions import AccountPermissions

PERMISSION_LEVELS = ','.join(str(value) for value, _ in Vault.PERMISSION_CHOICES)


class CreateVault(BaseService):
    """Create a vault; the author becomes its manager."""

    action_name = 'vault_created'

    def rules(self):
        return {
            **AUTHOR_RULES,
            'name': ['required', 'string', 'max:255'],
            'description': ['nullable', 'string'],
        }

    def permissions(self):
        return [
            AccountPermissions.BELONG_TO_ACCOUNT,
        ]

    def mutate(self) -> Vault:
        self.vault = Vault.objects.create(
            account=self.account,
            name=self.data['name'],
            description=self.data.get('description') or '',
        )

        UserVault.objects.create(
            user=self.author,
            vault=self.vault,
            permission=Vault.PERMISSION_MANAGE,
        )

        return self.vault

    def audit_objects(self):
        return {
            'vault_name': self.vault.name,
        }


class GrantVaultAccess(BaseService):
    """Give a user of the same account a permission level in a vault."""

    action_name = 'vault_access_granted'

    def rules(self):
        return {
            **VAULT_RULES,
            'user_id': ['required', 'integer', Exists('users')],
            'permission': ['required', 'integer', f'in:{PERMISSION_LEVELS}'],
        }

    def permissions(self):
        return [
            AccountPermissions.BELONG_TO_ACCOUNT,
            AccountPermissions.VAULT_MANAGER,
        ]

    def fetch(self):
        self.user = get_scoped(User, self.data['user_id'], account_id=self.account.id)

    def mutate(self) -> UserVault:
        self.access, _ = UserVault.objects.update_or_create(
            user=self.user,
            vault=self.vault,
            defaults={'permission': int(self.data['permission'])},
        )
        return self.access

    def audit_objects(self):
        return {
            'vault_name': self.vault.name,
            'user_name': self.user.name,
            'permission': self.access.permission,
        }
