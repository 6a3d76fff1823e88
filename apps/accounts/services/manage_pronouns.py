from apps.core.repositories import get_scoped
from apps.core.services import AUTHOR_RULES, BaseService
from apps.core.validation import Exists

from ..models import Pronoun
from ..permissions import ADMINISTRATOR_PERMISSIONS


class CreatePronoun(BaseService):
    action_name = 'pronoun_created'

    def rules(self):
        return {
            **AUTHOR_RULES,
            'name': ['required', 'string', 'max:255'],
        }

    def permissions(self):
        return ADMINISTRATOR_PERMISSIONS

    def mutate(self) -> Pronoun:
        self.pronoun = Pronoun.objects.create(
            account=self.account,
            name=self.data['name'],
        )
        return self.pronoun

    def audit_objects(self):
        return {'name': self.pronoun.name}


class UpdatePronoun(BaseService):
    action_name = 'pronoun_updated'

    def rules(self):
        return {
            **AUTHOR_RULES,
            'pronoun_id': ['required', 'integer', Exists('pronouns')],
            'name': ['required', 'string', 'max:255'],
        }

    def permissions(self):
        return ADMINISTRATOR_PERMISSIONS

    def fetch(self):
        self.pronoun = get_scoped(Pronoun, self.data['pronoun_id'], account_id=self.account.id)

    def mutate(self) -> Pronoun:
        self.pronoun.name = self.data['name']
        self.pronoun.save()
        return self.pronoun

    def audit_objects(self):
        return {'name': self.pronoun.name}


class DestroyPronoun(BaseService):
    """Delete a pronoun; contacts using it are left without one."""

    action_name = 'pronoun_destroyed'

    def rules(self):
        return {
            **AUTHOR_RULES,
            'pronoun_id': ['required', 'integer', Exists('pronouns')],
        }

    def permissions(self):
        return ADMINISTRATOR_PERMISSIONS

    def fetch(self):
        self.pronoun = get_scoped(Pronoun, self.data['pronoun_id'], account_id=self.account.id)

    def mutate(self) -> None:
        self.pronoun.delete()

    def audit_objects(self):
        return {'name': self.pronoun.name}
