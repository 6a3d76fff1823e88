"""
Contact models for Kinship.

A contact belongs to exactly one vault; its addresses belong to it.
"""

from django.db import models

from apps.core.models import BaseModel


class Contact(BaseModel):
    """A person record stored in a vault."""

    vault = models.ForeignKey(
        'accounts.Vault',
        on_delete=models.CASCADE,
        related_name='contacts'
    )
    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255, blank=True, default='')
    middle_name = models.CharField(max_length=255, blank=True, default='')
    nickname = models.CharField(max_length=255, blank=True, default='')
    maiden_name = models.CharField(max_length=255, blank=True, default='')
    pronoun = models.ForeignKey(
        'accounts.Pronoun',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='contacts'
    )

    class Meta:
        db_table = 'contacts'

    def __str__(self):
        return self.name

    @property
    def name(self) -> str:
        return ' '.join(part for part in [self.first_name, self.last_name] if part)


class Address(BaseModel):
    """Postal address of a contact."""

    contact = models.ForeignKey(
        Contact,
        on_delete=models.CASCADE,
        related_name='addresses'
    )
    address_type = models.ForeignKey(
        'accounts.AddressType',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='addresses'
    )
    street = models.CharField(max_length=255, blank=True, default='')
    city = models.CharField(max_length=255, blank=True, default='')
    province = models.CharField(max_length=255, blank=True, default='')
    postal_code = models.CharField(max_length=255, blank=True, default='')
    country = models.CharField(max_length=255, blank=True, default='')
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    is_past_address = models.BooleanField(default=False)

    class Meta:
        db_table = 'addresses'

    def __str__(self):
        return self.one_line

    @property
    def one_line(self) -> str:
        """Address formatted on a single line."""
        parts = [self.street, self.city, self.province, self.postal_code, self.country]
        return ', '.join(part for part in parts if part)
