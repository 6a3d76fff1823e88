"""
Shared fixtures for service tests.
"""

import itertools
import json
from contextlib import contextmanager
from unittest import mock

from apps.accounts.models import Account, User, UserVault, Vault

_sequence = itertools.count(1)


class ServiceTestMixin:
    """Helpers to build tenants and observe audit dispatch."""

    def create_account(self) -> Account:
        return Account.objects.create()

    def create_user(self, account=None, administrator=True, **kwargs) -> User:
        number = next(_sequence)
        defaults = {
            'username': f'user{number}',
            'email': f'user{number}@example.com',
            'first_name': 'Regis',
            'last_name': f'Freyd{number}',
        }
        defaults.update(kwargs)
        return User.objects.create(
            account=account or self.create_account(),
            is_account_administrator=administrator,
            **defaults
        )

    def create_vault(self, account, name='Family') -> Vault:
        return Vault.objects.create(account=account, name=name)

    def set_permission_in_vault(self, user, permission, vault) -> Vault:
        UserVault.objects.update_or_create(
            user=user,
            vault=vault,
            defaults={'permission': permission},
        )
        return vault

    @contextmanager
    def fake_queue(self):
        """Replace the audit task so dispatched messages can be inspected."""
        with mock.patch('apps.audit.dispatch.create_audit_log') as task:
            yield task

    @contextmanager
    def run_service(self):
        """Fake the queue and run on-commit callbacks when the block exits."""
        with self.fake_queue() as queue:
            with self.captureOnCommitCallbacks(execute=True):
                yield queue

    def assertAuditPushed(self, queue, action_name, objects=None):
        """Assert exactly one audit message was sent, and return it."""
        self.assertEqual(queue.delay.call_count, 1)
        payload = queue.delay.call_args[0][0]
        self.assertEqual(payload['action_name'], action_name)
        if objects is not None:
            self.assertEqual(json.loads(payload['objects']), objects)
        return payload

    def assertNothingPushed(self, queue):
        queue.delay.assert_not_called()
