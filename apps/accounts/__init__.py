"""
Accounts domain for Kinship.

Provides tenants, users, vaults, vault permissions and the reference
data (address types, pronouns, relationship types) each account owns.
"""
