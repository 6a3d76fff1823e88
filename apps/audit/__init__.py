"""
Audit domain for Kinship.

Services describe every action they perform; the description is handed
to a Celery worker that stores it as an immutable AuditLog row.
"""
