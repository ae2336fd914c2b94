"""
Entity Store
Repository over every panel collection, with an in-memory and a SQLAlchemy backend.

Both backends expose the same surface (find/get/list/upsert/count/next_id/locked),
so the dispatcher never knows where records live.
"""
import enum
import threading
import logging
from contextlib import contextmanager, ExitStack
from typing import Dict, List, Optional

from database.models import (
    Addon,
    Backup,
    Bitacora,
    EconomyTransaction,
    ManagedDatabase,
    Player,
    Server,
    Task,
    Theme,
    User,
)
from database import schemas

logger = logging.getLogger(__name__)


class EntityKind(str, enum.Enum):
    SERVER = "server"
    PLAYER = "player"
    USER = "user"
    ADDON = "addon"
    THEME = "theme"
    BACKUP = "backup"
    DATABASE = "database"
    TASK = "task"
    LOG = "log"
    TRANSACTION = "transaction"


MODELS = {
    EntityKind.SERVER: Server,
    EntityKind.PLAYER: Player,
    EntityKind.USER: User,
    EntityKind.ADDON: Addon,
    EntityKind.THEME: Theme,
    EntityKind.BACKUP: Backup,
    EntityKind.DATABASE: ManagedDatabase,
    EntityKind.TASK: Task,
    EntityKind.LOG: Bitacora,
    EntityKind.TRANSACTION: EconomyTransaction,
}

KIND_BY_MODEL = {model: kind for kind, model in MODELS.items()}

SCHEMAS = {
    EntityKind.SERVER: schemas.ServerResponse,
    EntityKind.PLAYER: schemas.PlayerResponse,
    EntityKind.USER: schemas.UserResponse,
    EntityKind.ADDON: schemas.CatalogItemResponse,
    EntityKind.THEME: schemas.CatalogItemResponse,
    EntityKind.BACKUP: schemas.BackupResponse,
    EntityKind.DATABASE: schemas.DatabaseResponse,
    EntityKind.TASK: schemas.TaskResponse,
    EntityKind.LOG: schemas.BitacoraEntry,
    EntityKind.TRANSACTION: schemas.TransactionResponse,
}

# Lock acquisition order; audit collections always come last
KIND_ORDER = list(EntityKind)


def kind_of(entity) -> EntityKind:
    try:
        return KIND_BY_MODEL[type(entity)]
    except KeyError:
        raise TypeError(f"Unsupported entity type: {type(entity).__name__}")


def serialize(kind: EntityKind, entity) -> dict:
    return SCHEMAS[kind].model_validate(entity).model_dump(mode="json")


class Store:
    """Common behaviour; backends implement get/list/upsert/count and _lock_for."""

    backend = "abstract"

    def get(self, kind: EntityKind, entity_id: str):
        raise NotImplementedError

    def list(self, kind: EntityKind) -> List:
        raise NotImplementedError

    def upsert(self, entity):
        raise NotImplementedError

    def count(self, kind: EntityKind) -> int:
        raise NotImplementedError

    def _lock_for(self, kind: EntityKind):
        raise NotImplementedError

    def find(self, kind: EntityKind, entity_id) -> Optional[object]:
        if entity_id is None:
            return None
        return self.get(kind, str(entity_id))

    def next_id(self, kind: EntityKind, prefix: str) -> str:
        """``<prefix><N+1>`` where N is the collection size, bumped until unused."""
        n = self.count(kind) + 1
        candidate = f"{prefix}{n}"
        while self.get(kind, candidate) is not None:
            n += 1
            candidate = f"{prefix}{n}"
        return candidate

    @contextmanager
    def locked(self, *kinds: EntityKind):
        """Serialize mutation of the given collections (always acquired in KIND_ORDER)."""
        ordered = sorted(set(kinds), key=KIND_ORDER.index)
        with ExitStack() as stack:
            for kind in ordered:
                stack.enter_context(self._lock_for(kind))
            yield self

    def snapshot(self) -> Dict[str, List[dict]]:
        return {
            kind.value: [serialize(kind, entity) for entity in self.list(kind)]
            for kind in EntityKind
        }


class MemoryStore(Store):
    """One insertion-ordered dict per collection, keyed by id."""

    backend = "memory"

    def __init__(self):
        self._collections: Dict[EntityKind, Dict[str, object]] = {kind: {} for kind in EntityKind}
        self._locks = {kind: threading.RLock() for kind in EntityKind}

    def _lock_for(self, kind: EntityKind):
        return self._locks[kind]

    def get(self, kind: EntityKind, entity_id: str):
        return self._collections[kind].get(entity_id)

    def list(self, kind: EntityKind) -> List:
        return list(self._collections[kind].values())

    def count(self, kind: EntityKind) -> int:
        return len(self._collections[kind])

    def upsert(self, entity):
        kind = kind_of(entity)
        with self._locks[kind]:
            self._collections[kind][entity.id] = entity
        return entity


class SqlStore(Store):
    """Same surface over a SQLAlchemy session registry (see database.connection)."""

    backend = "sql"

    def __init__(self, session_factory):
        self.session_factory = session_factory
        # One writer at a time; sessions are thread-local through scoped_session
        self._lock = threading.RLock()

    @property
    def session(self):
        return self.session_factory()

    def _lock_for(self, kind: EntityKind):
        return self._lock

    def get(self, kind: EntityKind, entity_id: str):
        return self.session.get(MODELS[kind], entity_id)

    def list(self, kind: EntityKind) -> List:
        return self.session.query(MODELS[kind]).all()

    def count(self, kind: EntityKind) -> int:
        return self.session.query(MODELS[kind]).count()

    def upsert(self, entity):
        session = self.session
        with self._lock:
            try:
                merged = session.merge(entity)
                session.commit()
            except Exception:
                logger.exception("Failed to persist %s %s", type(entity).__name__, getattr(entity, "id", None))
                session.rollback()
                raise
        return merged
