"""
Contacts domain for Kinship.

Contacts live in vaults; every operation on them is scoped to the vault
named in the request.
"""
