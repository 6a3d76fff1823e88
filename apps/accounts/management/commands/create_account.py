"""
Management command to create an account and its first administrator.

Usage:
    python manage.py create_account --email regis@example.com \
        --first-name Regis --last-name Freyd
"""

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import IntegrityError

from apps.accounts.services import CreateAccount


class Command(BaseCommand):
    help = 'Create an account with its administrator and default reference data'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True, help='Administrator email')
        parser.add_argument('--first-name', required=True, help='Administrator first name')
        parser.add_argument('--last-name', required=True, help='Administrator last name')
        parser.add_argument(
            '--username',
            default=None,
            help='Administrator username (default: the email)'
        )

    def handle(self, *args, **options):
        try:
            user = CreateAccount().execute({
                'email': options['email'],
                'first_name': options['first_name'],
                'last_name': options['last_name'],
                'username': options['username'],
            })
        except ValidationError as e:
            raise CommandError(f'Invalid account details: {e.message_dict}')
        except IntegrityError:
            raise CommandError('A user with that username already exists')

        self.stdout.write(self.style.SUCCESS(
            f'Created account {user.account_id} with administrator {user.username} (id {user.id})'
        ))
