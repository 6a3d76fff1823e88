from apps.core.repositories import get_scoped
from apps.core.services import AUTHOR_RULES, BaseService
from apps.core.validation import Exists

from ..models import AddressType
from ..permissions import ADMINISTRATOR_PERMISSIONS


class CreateAddressType(BaseService):
    """Create an address type."""

    action_name = 'address_type_created'

    def rules(self):
        return {
            **AUTHOR_RULES,
            'name': ['required', 'string', 'max:255'],
        }

    def permissions(self):
        return ADMINISTRATOR_PERMISSIONS

    def mutate(self) -> AddressType:
        self.address_type = AddressType.objects.create(
            account=self.account,
            name=self.data['name'],
        )
        return self.address_type

    def audit_objects(self):
        return {'name': self.address_type.name}


class UpdateAddressType(BaseService):
    """Rename an address type."""

    action_name = 'address_type_updated'

    def rules(self):
        return {
            **AUTHOR_RULES,
            'address_type_id': ['required', 'integer', Exists('address_types')],
            'name': ['required', 'string', 'max:255'],
        }

    def permissions(self):
        return ADMINISTRATOR_PERMISSIONS

    def fetch(self):
        self.address_type = get_scoped(
            AddressType, self.data['address_type_id'], account_id=self.account.id
        )

    def mutate(self) -> AddressType:
        self.address_type.name = self.data['name']
        self.address_type.save()
        return self.address_type

    def audit_objects(self):
        return {'name': self.address_type.name}


class DestroyAddressType(BaseService):
    """
    Delete an address type.

    Addresses using the type keep existing, without a type.
    """

    action_name = 'address_type_destroyed'

    def rules(self):
        return {
            **AUTHOR_RULES,
            'address_type_id': ['required', 'integer', Exists('address_types')],
        }

    def permissions(self):
        return ADMINISTRATOR_PERMISSIONS

    def fetch(self):
        self.address_type = get_scoped(
            AddressType, self.data['address_type_id'], account_id=self.account.id
        )

    def mutate(self) -> None:
        self.address_type.delete()

    def audit_objects(self):
        return {'name': self.address_type.name}
