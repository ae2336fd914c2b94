import logging
from typing import Optional

from app.config import Settings
from app.services.store import Store, MemoryStore, SqlStore
from app.services.audit_service import AuditService
from app.services.dispatcher import ActionDispatcher
from app.services.shell_service import ShellExecutor
from app.services.ai_service import AiSuggestionService
from app.services.world_service import WorldEditService
from database.seeder import run_all_seeders

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> Store:
    if settings.store_backend == "memory":
        return MemoryStore()
    if settings.store_backend == "sql":
        from database.connection import get_engine, get_session_factory
        from database.models import Base

        Base.metadata.create_all(bind=get_engine())
        return SqlStore(get_session_factory())
    raise ValueError(f"Unknown STORE_BACKEND: {settings.store_backend}")


class PanelContext:
    """
    Everything the HTTP front door and the CLI console share.

    Both must hold the same instance so they see the same store.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[Store] = None,
        shell=None,
        ai: Optional[AiSuggestionService] = None,
        seed: bool = True,
    ):
        self.settings = settings or Settings()
        self.store = store if store is not None else build_store(self.settings)
        if seed:
            run_all_seeders(self.store, self.settings)

        self.shell = shell or ShellExecutor(self.settings.shell_command, self.settings.shell_timeout)
        self.audit = AuditService(self.store)
        self.dispatcher = ActionDispatcher(self.store, self.shell, self.audit)
        self.ai = ai or AiSuggestionService.from_settings(self.settings)
        self.world = WorldEditService(self.shell, self.audit)
        self.panel_name = self.settings.panel_name
        logger.info(f"Panel '{self.panel_name}' ready ({self.store.backend} store)")

    @property
    def title(self) -> str:
        return f"{self.panel_name} Control Panel"

    def rename(self, name: str) -> str:
        self.panel_name = name.strip() or "Lonely"
        return self.panel_name
