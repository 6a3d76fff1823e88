"""
Contact address management.

Every lookup is scoped: the contact to the vault, the address type to
the account and the address to the contact.
"""

from apps.accounts.models import AddressType
from apps.core.repositories import get_scoped
from apps.core.validation import Exists, is_blank

from ..models import Address
from .manage_contacts import CONTACT_RULES, ContactService

ADDRESS_FIELDS = ['street', 'city', 'province', 'postal_code', 'country']
COORDINATE_FIELDS = ['latitude', 'longitude']


def _address_rules():
    return {
        'address_type_id': ['nullable', 'integer', Exists('address_types')],
        'street': ['nullable', 'string', 'max:255'],
        'city': ['nullable', 'string', 'max:255'],
        'province': ['nullable', 'string', 'max:255'],
        'postal_code': ['nullable', 'string', 'max:255'],
        'country': ['nullable', 'string', 'max:255'],
        'latitude': ['nullable', 'numeric'],
        'longitude': ['nullable', 'numeric'],
        'is_past_address': ['nullable', 'boolean'],
    }


class ContactAddressService(ContactService):
    """Shared fetch and snapshot for address services."""

    def fetch_address_type(self):
        self.address_type = None
        if not is_blank(self.data.get('address_type_id')):
            self.address_type = get_scoped(
                AddressType, self.data['address_type_id'], account_id=self.account.id
            )

    def fetch_address(self):
        self.address = get_scoped(Address, self.data['address_id'], contact_id=self.contact.id)

    def apply_fields(self, address: Address) -> Address:
        address.address_type = self.address_type
        for field in ADDRESS_FIELDS:
            setattr(address, field, self.data.get(field) or '')
        for field in COORDINATE_FIELDS:
            value = self.data.get(field)
            setattr(address, field, None if is_blank(value) else float(value))
        address.is_past_address = bool(int(self.data.get('is_past_address') or 0))
        return address

    def audit_objects(self):
        return {
            'contact_name': self.contact.name,
            'address': self.address.one_line,
        }


class CreateContactAddress(ContactAddressService):
    """Add an address to a contact."""

    action_name = 'contact_address_created'

    def rules(self):
        return {
            **CONTACT_RULES,
            **_address_rules(),
        }

    def fetch(self):
        super().fetch()
        self.fetch_address_type()

    def mutate(self) -> Address:
        self.address = self.apply_fields(Address(contact=self.contact))
        self.address.save()
        return self.address


class UpdateContactAddress(ContactAddressService):
    """Update a contact address in place."""

    action_name = 'contact_address_updated'

    def rules(self):
        return {
            **CONTACT_RULES,
            'address_id': ['required', 'integer', Exists('addresses')],
            **_address_rules(),
        }

    def fetch(self):
        super().fetch()
        self.fetch_address_type()
        self.fetch_address()

    def mutate(self) -> Address:
        self.apply_fields(self.address)
        self.address.save()
        return self.address


class DestroyContactAddress(ContactAddressService):
    """Remove an address from a contact."""

    action_name = 'contact_address_destroyed'

    def rules(self):
        return {
            **CONTACT_RULES,
            'address_id': ['required', 'integer', Exists('addresses')],
        }

    def fetch(self):
        super().fetch()
        self.fetch_address()

    def mutate(self) -> None:
        self.address.delete()
