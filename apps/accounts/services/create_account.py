"""
Account creation.

Creates the tenant, its first administrator and the default reference
data in a single transaction.
"""

from typing import Any, Dict

from apps.core.services import BaseService

from ..defaults import populate_account
from ..models import Account, User


class CreateAccount(BaseService):
    """Create an account and its first administrator."""

    action_name = 'account_created'

    def rules(self):
        return {
            'email': ['required', 'string', 'max:255'],
            'first_name': ['required', 'string', 'max:150'],
            'last_name': ['required', 'string', 'max:150'],
            'username': ['nullable', 'string', 'max:150'],
        }

    def mutate(self) -> User:
        self.account = Account.objects.create()

        self.author = User.objects.create_user(
            username=self.data.get('username') or self.data['email'],
            email=self.data['email'],
            first_name=self.data['first_name'],
            last_name=self.data['last_name'],
            account=self.account,
            is_account_administrator=True,
        )

        populate_account(self.account)

        return self.author

    def audit_objects(self) -> Dict[str, Any]:
        return {
            'email': self.author.email,
        }
