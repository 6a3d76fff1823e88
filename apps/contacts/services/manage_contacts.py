from apps.accounts.models import Pronoun
from apps.accounts.permissions import AccountPermissions
from apps.core.repositories import get_scoped
from apps.core.services import VAULT_RULES, BaseService
from apps.core.validation import Exists, is_blank

from ..models import Contact

VAULT_EDITOR_PERMISSIONS = [
    AccountPermissions.BELONG_TO_ACCOUNT,
    AccountPermissions.VAULT_EDITOR,
]

CONTACT_RULES = {
    **VAULT_RULES,
    'contact_id': ['required', 'integer', Exists('contacts')],
}

NAME_FIELDS = ['first_name', 'last_name', 'middle_name', 'nickname', 'maiden_name']


class ContactService(BaseService):
    """Shared permissions and fetch for services acting on an existing contact."""

    def permissions(self):
        return VAULT_EDITOR_PERMISSIONS

    def fetch(self):
        self.contact = get_scoped(Contact, self.data['contact_id'], vault_id=self.vault.id)

    def audit_objects(self):
        return {'contact_name': self.contact.name}


def _name_rules():
    return {
        'first_name': ['required', 'string', 'max:255'],
        'last_name': ['nullable', 'string', 'max:255'],
        'middle_name': ['nullable', 'string', 'max:255'],
        'nickname': ['nullable', 'string', 'max:255'],
        'maiden_name': ['nullable', 'string', 'max:255'],
        'pronoun_id': ['nullable', 'integer', Exists('pronouns')],
    }


def _fetch_pronoun(service):
    if is_blank(service.data.get('pronoun_id')):
        return None
    return get_scoped(Pronoun, service.data['pronoun_id'], account_id=service.account.id)


class CreateContact(BaseService):
    """Create a contact in a vault."""

    action_name = 'contact_created'

    def rules(self):
        return {
            **VAULT_RULES,
            **_name_rules(),
        }

    def permissions(self):
        return VAULT_EDITOR_PERMISSIONS

    def fetch(self):
        self.pronoun = _fetch_pronoun(self)

    def mutate(self) -> Contact:
        self.contact = Contact.objects.create(
            vault=self.vault,
            pronoun=self.pronoun,
            **{field: self.data.get(field) or '' for field in NAME_FIELDS},
        )
        return self.contact

    def audit_objects(self):
        return {'contact_name': self.contact.name}


class UpdateContact(ContactService):
    """Update a contact's names and pronoun."""

    action_name = 'contact_updated'

    def rules(self):
        return {
            **CONTACT_RULES,
            **_name_rules(),
        }

    def fetch(self):
        super().fetch()
        self.pronoun = _fetch_pronoun(self)

    def mutate(self) -> Contact:
        for field in NAME_FIELDS:
            setattr(self.contact, field, self.data.get(field) or '')
        self.contact.pronoun = self.pronoun
        self.contact.save()
        return self.contact


class DestroyContact(ContactService):
    """Delete a contact and everything attached to it."""

    action_name = 'contact_destroyed'

    def rules(self):
        return CONTACT_RULES

    def mutate(self) -> None:
        self.contact.delete()
