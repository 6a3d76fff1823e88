from apps.accounts.models import Pronoun
from apps.core.repositories import get_scoped
from apps.core.validation import Exists

from ..models import Contact
from .manage_contacts import CONTACT_RULES, ContactService


class SetContactPronoun(ContactService):
    """Set the pronoun of a contact."""

    action_name = 'contact_pronoun_set'

    def rules(self):
        return {
            **CONTACT_RULES,
            'pronoun_id': ['required', 'integer', Exists('pronouns')],
        }

    def fetch(self):
        super().fetch()
        self.pronoun = get_scoped(Pronoun, self.data['pronoun_id'], account_id=self.account.id)

    def mutate(self) -> Contact:
        self.contact.pronoun = self.pronoun
        self.contact.save()
        return self.contact

    def audit_objects(self):
        return {
            'contact_name': self.contact.name,
            'pronoun_name': self.pronoun.name,
        }


class RemoveContactPronoun(ContactService):
    """Remove the pronoun of a contact."""

    action_name = 'contact_pronoun_removed'

    def rules(self):
        return CONTACT_RULES

    def fetch(self):
        super().fetch()
        self.pronoun = self.contact.pronoun

    def mutate(self) -> Contact:
        self.contact.pronoun = None
        self.contact.save()
        return self.contact

    def audit_objects(self):
        return {
            'contact_name': self.contact.name,
            'pronoun_name': self.pronoun.name if self.pronoun else None,
        }
