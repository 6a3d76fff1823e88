"""
Tests for account creation.

Covers:
- CreateAccount service
- Default reference data
- create_account management command
"""

from io import StringIO

from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import IntegrityError
from django.test import TestCase

from apps.accounts.defaults import (
    DEFAULT_ADDRESS_TYPES,
    DEFAULT_PRONOUNS,
    DEFAULT_RELATIONSHIP_TYPES,
)
from apps.accounts.models import (
    Account,
    AddressType,
    Pronoun,
    RelationshipGroupType,
    RelationshipType,
    User,
)
from apps.accounts.services import CreateAccount
from apps.core.exceptions import ErrorKind

from .helpers import ServiceTestMixin


class CreateAccountTestCase(ServiceTestMixin, TestCase):
    """Test the CreateAccount service."""

    def setUp(self):
        self.request = {
            'email': 'regis@example.com',
            'first_name': 'Regis',
            'last_name': 'Freyd',
        }

    def test_creates_an_account_and_its_administrator(self):
        """Test the administrator is attached to a new account."""
        with self.run_service() as queue:
            user = CreateAccount().execute(self.request)

        self.assertIsInstance(user, User)
        self.assertIsNotNone(user.account_id)
        self.assertTrue(user.is_account_administrator)
        self.assertEqual(user.username, 'regis@example.com')
        self.assertEqual(user.name, 'Regis Freyd')
        self.assertFalse(user.has_usable_password())

        payload = self.assertAuditPushed(queue, 'account_created', {'email': 'regis@example.com'})
        self.assertEqual(payload['account_id'], user.account_id)
        self.assertEqual(payload['author_id'], user.id)

    def test_uses_the_given_username(self):
        """Test an explicit username wins over the email."""
        with self.run_service():
            user = CreateAccount().execute({**self.request, 'username': 'regis'})

        self.assertEqual(user.username, 'regis')

    def test_populates_default_reference_data(self):
        """Test every new account gets the default taxonomy."""
        with self.run_service():
            user = CreateAccount().execute(self.request)

        account = user.account
        self.assertEqual(Pronoun.objects.filter(account=account).count(), len(DEFAULT_PRONOUNS))
        self.assertEqual(AddressType.objects.filter(account=account).count(), len(DEFAULT_ADDRESS_TYPES))
        self.assertEqual(
            set(RelationshipGroupType.objects.filter(account=account).values_list('name', flat=True)),
            set(DEFAULT_RELATIONSHIP_TYPES)
        )
        self.assertEqual(
            RelationshipType.objects.filter(relationship_group_type__account=account).count(),
            sum(len(types) for types in DEFAULT_RELATIONSHIP_TYPES.values())
        )
        self.assertTrue(
            RelationshipType.objects.filter(
                relationship_group_type__account=account,
                name='parent',
                name_reverse_relationship='child',
            ).exists()
        )

    def test_accounts_do_not_share_reference_data(self):
        """Test two accounts each get their own copy of the defaults."""
        with self.run_service():
            first = CreateAccount().execute(self.request)
            second = CreateAccount().execute({**self.request, 'email': 'ross@example.com'})

        self.assertNotEqual(first.account_id, second.account_id)
        self.assertEqual(
            Pronoun.objects.filter(account=second.account).count(), len(DEFAULT_PRONOUNS)
        )

    def test_fails_if_wrong_parameters_are_given(self):
        """Test every missing field is reported."""
        service = CreateAccount()

        with self.run_service() as queue:
            with self.assertRaises(ValidationError) as ctx:
                service.execute({'email': 'regis@example.com'})

        self.assertEqual(set(ctx.exception.message_dict), {'first_name', 'last_name'})
        self.assertEqual(service.error_kind, ErrorKind.VALIDATION)
        self.assertFalse(Account.objects.exists())
        self.assertNothingPushed(queue)

    def test_duplicate_username_rolls_back_the_account(self):
        """Test a store failure leaves no partial tenant behind."""
        with self.run_service():
            CreateAccount().execute(self.request)

        service = CreateAccount()
        with self.run_service() as queue:
            with self.assertRaises(IntegrityError):
                service.execute(self.request)

        self.assertEqual(service.error_kind, ErrorKind.MUTATION)
        self.assertEqual(Account.objects.count(), 1)
        self.assertNothingPushed(queue)


class CreateAccountCommandTestCase(ServiceTestMixin, TestCase):
    """Test the create_account management command."""

    def call(self, *args):
        out = StringIO()
        with self.run_service():
            call_command('create_account', *args, stdout=out)
        return out.getvalue()

    def test_creates_an_account(self):
        """Test the command creates the account and reports it."""
        output = self.call(
            '--email', 'regis@example.com',
            '--first-name', 'Regis',
            '--last-name', 'Freyd',
            '--username', 'regis',
        )

        user = User.objects.get(username='regis')
        self.assertTrue(user.is_account_administrator)
        self.assertIn(f'Created account {user.account_id}', output)

    def test_invalid_details_raise_command_error(self):
        """Test validation errors are reported as command errors."""
        with self.assertRaises(CommandError) as ctx:
            self.call('--email', 'regis@example.com', '--first-name', '', '--last-name', 'Freyd')

        self.assertIn('first_name', str(ctx.exception))
        self.assertFalse(Account.objects.exists())

    def test_duplicate_username_raises_command_error(self):
        """Test an existing username is reported as a command error."""
        args = ('--email', 'regis@example.com', '--first-name', 'Regis', '--last-name', 'Freyd')
        self.call(*args)

        with self.assertRaises(CommandError):
            self.call(*args)

        self.assertEqual(Account.objects.count(), 1)
