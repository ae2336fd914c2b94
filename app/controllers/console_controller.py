"""
Console Controller
Line commands for the interactive console. Operates on the same PanelContext
(and therefore the same store) as the HTTP front door.
"""
import asyncio
import logging
from app.errors import PanelError
from app.services.store import EntityKind

logger = logging.getLogger(__name__)

HELP = "Commands: start <id>, stop <id>, balance [userId], rename <name>, help, exit"


class ConsoleController:
    def __init__(self, context):
        self.context = context

    def handle(self, line: str) -> str:
        """Run one console line and return the text to print."""
        command, _, rest = line.strip().partition(" ")
        args = rest.split()

        if command == "start":
            return self._run(self.context.dispatcher.start_server(args[0] if args else None))
        if command == "stop":
            return self._run(self.context.dispatcher.stop_server(args[0] if args else None))
        if command == "balance":
            return self.balance(args[0] if args else self.context.settings.panel_user_id)
        if command == "rename":
            return f"Panel renamed to {self.context.rename(rest)}"
        if command == "help":
            return HELP
        return "Unknown command"

    def balance(self, user_id) -> str:
        user = self.context.store.find(EntityKind.USER, user_id)
        if user is None:
            return "User not found"
        return f"User balance: ${user.balance}"

    def _run(self, coroutine) -> str:
        try:
            return asyncio.run(coroutine)
        except PanelError as e:
            return e.message
