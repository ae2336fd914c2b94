import logging
from app.errors import SideEffectFailed

logger = logging.getLogger(__name__)


class WorldEditService:
    """Triggers the external world editor through the shell executor."""

    def __init__(self, shell, audit=None):
        self.shell = shell
        self.audit = audit

    async def open_editor(self) -> str:
        try:
            await self.shell.run("Opening world editor")
        except SideEffectFailed as e:
            raise SideEffectFailed(e.detail, action="open world editor") from e
        if self.audit:
            self.audit.log_action("OPEN_WORLD_EDITOR", "World editor opened.")
        return "World editor opened!"
