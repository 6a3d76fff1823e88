"""
Base class for business operations.

Every service runs the same fixed pipeline:

    received -> validated -> authorized -> fetched -> mutated -> audited -> completed

Any step may abort the invocation, which leaves the service in the
``failed`` state with the classified error kind. Fetch, mutate and the
audit dispatch share one database transaction. The audit message is
only handed to the queue once that transaction has committed.

Subclasses declare:
- action_name: audit action emitted on success
- rules(): payload validation rules
- permissions(): named permission checks
- fetch(): scoped fetches of the entities involved
- mutate(): the single create/update/delete
- audit_objects(): snapshot of what changed
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from django.db import transaction

from apps.accounts.models import Account, User, Vault
from apps.audit.dispatch import dispatch_audit_log
from apps.core.exceptions import ErrorKind
from apps.core.logging_config import correlation_scope, log_operation_context
from apps.core.permissions import permission_registry
from apps.core.repositories import get_scoped
from apps.core.validation import Exists, RuleSet, is_blank, validate_payload


# Rules shared by every service acting on behalf of an author
AUTHOR_RULES = {
    'account_id': ['required', 'integer', Exists('accounts')],
    'author_id': ['required', 'integer', Exists('users')],
}

# Rules shared by every service acting inside a vault
VAULT_RULES = {
    **AUTHOR_RULES,
    'vault_id': ['required', 'integer', Exists('vaults')],
}


class ServiceState(str, Enum):
    RECEIVED = 'received'
    VALIDATED = 'validated'
    AUTHORIZED = 'authorized'
    FETCHED = 'fetched'
    MUTATED = 'mutated'
    AUDITED = 'audited'
    COMPLETED = 'completed'
    FAILED = 'failed'


class BaseService:
    """
    Orchestrates one business operation.

    Instances hold per-invocation state only; create a new instance for
    each call, or re-use one sequentially.
    """

    action_name: str = ''

    def __init__(self):
        self._reset()

    def _reset(self):
        self.state = ServiceState.RECEIVED
        self.error_kind: Optional[ErrorKind] = None
        self.data: Dict[str, Any] = {}
        self.account: Optional[Account] = None
        self.author: Optional[User] = None
        self.vault: Optional[Vault] = None
        self.audit_payload: Optional[Dict[str, Any]] = None

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def rules(self) -> RuleSet:
        """Get the validation rules that apply to the service."""
        return {}

    def permissions(self) -> List[str]:
        """Get the permissions that apply to the author calling the service."""
        return []

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return validate_payload(data, self.rules())

    def resolve_context(self) -> None:
        """
        Load the account, the author and the vault named in the payload.

        The author and the vault are fetched scoped to the account, so a
        caller outside the account gets a not-found error.
        """
        account_id = self.data.get('account_id')
        if is_blank(account_id):
            return

        self.account = Account.objects.get(pk=account_id)

        if not is_blank(self.data.get('author_id')):
            self.author = get_scoped(User, self.data['author_id'], account_id=self.account.id)

        if not is_blank(self.data.get('vault_id')):
            self.vault = get_scoped(Vault, self.data['vault_id'], account_id=self.account.id)

    def authorize(self) -> None:
        self.resolve_context()
        permission_registry.enforce(self.permissions(), self.author, self)

    def fetch(self) -> None:
        """Fetch the entities involved, each scoped to its parent."""

    def mutate(self) -> Any:
        raise NotImplementedError

    def audit_objects(self) -> Dict[str, Any]:
        return {}

    def audit_action_name(self) -> str:
        return self.action_name

    def audit(self) -> None:
        self.audit_payload = dispatch_audit_log(
            account_id=self.author.account_id,
            author_id=self.author.id,
            author_name=self.author.name,
            action_name=self.audit_action_name(),
            objects=self.audit_objects(),
        )

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------

    def execute(self, data: Dict[str, Any]) -> Any:
        """
        Run the operation under its own correlation ID.

        Args:
            data: Request payload

        Returns:
            The created or updated entity, or None for deletions
        """
        self._reset()

        with correlation_scope(), log_operation_context(
            self.action_name or type(self).__name__,
            logger_name=type(self).__module__,
            account_id=data.get('account_id') if isinstance(data, dict) else None,
            author_id=data.get('author_id') if isinstance(data, dict) else None,
        ):
            try:
                self.data = self.validate(data)
                self.state = ServiceState.VALIDATED

                self.authorize()
                self.state = ServiceState.AUTHORIZED

                with transaction.atomic():
                    self.fetch()
                    self.state = ServiceState.FETCHED

                    result = self.mutate()
                    self.state = ServiceState.MUTATED

                    self.audit()
                    self.state = ServiceState.AUDITED

                self.state = ServiceState.COMPLETED
                return result

            except Exception as e:
                self.state = ServiceState.FAILED
                self.error_kind = ErrorKind.from_exception(e)
                raise
