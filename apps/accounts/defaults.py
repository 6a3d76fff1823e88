"""
Default reference data for new accounts.

Every account starts with the same pronouns, address types and
relationship taxonomy; administrators can edit or remove them later.
"""

from django.db import transaction

from .models import Account, AddressType, Pronoun, RelationshipGroupType, RelationshipType

DEFAULT_PRONOUNS = [
    'he/him',
    'she/her',
    'they/them',
    'per/per',
    've/ver',
    'xe/xem',
    'ze/hir',
]

DEFAULT_ADDRESS_TYPES = [
    'Home',
    'Secondary residence',
    'Work',
    'Chalet',
]

# group name -> [(name, name_reverse_relationship)]
DEFAULT_RELATIONSHIP_TYPES = {
    'Love': [
        ('significant other', 'significant other'),
        ('spouse', 'spouse'),
        ('date', 'date'),
        ('lover', 'lover'),
        ('in love with', 'loved by'),
        ('ex-boyfriend', 'ex-boyfriend'),
    ],
    'Family': [
        ('parent', 'child'),
        ('brother/sister', 'brother/sister'),
        ('grand parent', 'grand child'),
        ('uncle/aunt', 'nephew/niece'),
        ('cousin', 'cousin'),
        ('godparent', 'godchild'),
    ],
    'Friend': [
        ('friend', 'friend'),
        ('best friend', 'best friend'),
    ],
    'Work': [
        ('colleague', 'colleague'),
        ('subordinate', 'boss'),
        ('mentor', 'protege'),
    ],
}


@transaction.atomic
def populate_account(account: Account) -> None:
    """Create the default reference data for an account."""
    Pronoun.objects.bulk_create([
        Pronoun(account=account, name=name) for name in DEFAULT_PRONOUNS
    ])

    AddressType.objects.bulk_create([
        AddressType(account=account, name=name) for name in DEFAULT_ADDRESS_TYPES
    ])

    for group_name, types in DEFAULT_RELATIONSHIP_TYPES.items():
        group = RelationshipGroupType.objects.create(account=account, name=group_name)
        RelationshipType.objects.bulk_create([
            RelationshipType(
                relationship_group_type=group,
                name=name,
                name_reverse_relationship=reverse_name,
            )
            for name, reverse_name in types
        ])
