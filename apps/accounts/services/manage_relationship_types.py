"""
Relationship taxonomy management.

Group types are scoped to the account; relationship types are scoped to
their group type, which is itself fetched scoped to the account.
"""

from apps.core.repositories import get_scoped
from apps.core.services import AUTHOR_RULES, BaseService
from apps.core.validation import Exists

from ..models import RelationshipGroupType, RelationshipType
from ..permissions import ADMINISTRATOR_PERMISSIONS

GROUP_TYPE_RULES = {
    **AUTHOR_RULES,
    'relationship_group_type_id': ['required', 'integer', Exists('relationship_group_types')],
}


class RelationshipGroupTypeService(BaseService):
    """Shared fetch for services acting on an existing group type."""

    def permissions(self):
        return ADMINISTRATOR_PERMISSIONS

    def fetch(self):
        self.group = get_scoped(
            RelationshipGroupType,
            self.data['relationship_group_type_id'],
            account_id=self.account.id,
        )


class CreateRelationshipGroupType(BaseService):
    action_name = 'relationship_group_type_created'

    def rules(self):
        return {
            **AUTHOR_RULES,
            'name': ['required', 'string', 'max:255'],
        }

    def permissions(self):
        return ADMINISTRATOR_PERMISSIONS

    def mutate(self) -> RelationshipGroupType:
        self.group = RelationshipGroupType.objects.create(
            account=self.account,
            name=self.data['name'],
        )
        return self.group

    def audit_objects(self):
        return {'name': self.group.name}


class UpdateRelationshipGroupType(RelationshipGroupTypeService):
    action_name = 'relationship_group_type_updated'

    def rules(self):
        return {
            **GROUP_TYPE_RULES,
            'name': ['required', 'string', 'max:255'],
        }

    def mutate(self) -> RelationshipGroupType:
        self.group.name = self.data['name']
        self.group.save()
        return self.group

    def audit_objects(self):
        return {'name': self.group.name}


class DestroyRelationshipGroupType(RelationshipGroupTypeService):
    """Delete a group type together with every relationship type in it."""

    action_name = 'relationship_group_type_destroyed'

    def rules(self):
        return GROUP_TYPE_RULES

    def mutate(self) -> None:
        self.group.delete()

    def audit_objects(self):
        return {'name': self.group.name}


class CreateRelationshipType(RelationshipGroupTypeService):
    action_name = 'relationship_type_created'

    def rules(self):
        return {
            **GROUP_TYPE_RULES,
            'name': ['required', 'string', 'max:255'],
            'name_reverse_relationship': ['nullable', 'string', 'max:255'],
        }

    def mutate(self) -> RelationshipType:
        self.relationship_type = RelationshipType.objects.create(
            relationship_group_type=self.group,
            name=self.data['name'],
            name_reverse_relationship=self.data.get('name_reverse_relationship') or '',
        )
        return self.relationship_type

    def audit_objects(self):
        return {
            'name': self.relationship_type.name,
            'group_type_name': self.group.name,
        }


class UpdateRelationshipType(RelationshipGroupTypeService):
    action_name = 'relationship_type_updated'

    def rules(self):
        return {
            **GROUP_TYPE_RULES,
            'relationship_type_id': ['required', 'integer', Exists('relationship_types')],
            'name': ['required', 'string', 'max:255'],
            'name_reverse_relationship': ['nullable', 'string', 'max:255'],
        }

    def fetch(self):
        super().fetch()
        self.relationship_type = get_scoped(
            RelationshipType,
            self.data['relationship_type_id'],
            relationship_group_type_id=self.group.id,
        )

    def mutate(self) -> RelationshipType:
        self.relationship_type.name = self.data['name']
        self.relationship_type.name_reverse_relationship = self.data.get('name_reverse_relationship') or ''
        self.relationship_type.save()
        return self.relationship_type

    def audit_objects(self):
        return {
            'name': self.relationship_type.name,
            'group_type_name': self.group.name,
        }


class DestroyRelationshipType(RelationshipGroupTypeService):
    """Destroy a relationship type."""

    action_name = 'relationship_type_destroyed'

    def rules(self):
        return {
            **GROUP_TYPE_RULES,
            'relationship_type_id': ['required', 'integer', Exists('relationship_types')],
        }

    def fetch(self):
        super().fetch()
        self.relationship_type = get_scoped(
            RelationshipType,
            self.data['relationship_type_id'],
            relationship_group_type_id=self.group.id,
        )

    def mutate(self) -> None:
        self.relationship_type.delete()

    def audit_objects(self):
        return {
            'name': self.relationship_type.name,
            'group_type_name': self.group.name,
        }
