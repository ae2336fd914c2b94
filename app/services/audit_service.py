import datetime
import logging
from app.services.store import EntityKind
from database.models import Bitacora, EconomyTransaction

logger = logging.getLogger(__name__)


def utcnow():
    return datetime.datetime.now(datetime.timezone.utc)


class AuditService:
    """Appends to the action log (bitacora) and the economy ledger."""

    def __init__(self, store):
        self.store = store

    def log_action(self, action: str, message: str, username: str = "SYSTEM"):
        """
        Logs a panel action to the Bitacora.

        Args:
            action (str): Short code of the action (e.g., "START_SERVER")
            message (str): Human readable description shown on the dashboard
            username (str): Who performed it; "SYSTEM" when no user is involved
        """
        with self.store.locked(EntityKind.LOG):
            entry = Bitacora(
                id=self.store.next_id(EntityKind.LOG, "log"),
                timestamp=utcnow(),
                username=username,
                action=action,
                message=message,
            )
            return self.store.upsert(entry)

    def record_transaction(self, account_kind: str, account_id: str, transaction_type: str, amount: int):
        """Ledger entry for every balance change. ``amount`` is signed."""
        with self.store.locked(EntityKind.TRANSACTION):
            entry = EconomyTransaction(
                id=self.store.next_id(EntityKind.TRANSACTION, "txn"),
                account_kind=account_kind,
                account_id=account_id,
                transaction_type=transaction_type,
                amount=amount,
                date=utcnow(),
            )
            return self.store.upsert(entry)
