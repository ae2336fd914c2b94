"""
Action Dispatcher
Every panel operation: resolve ids, check preconditions, mutate, audit, notify.

The synchronous part of an action (resolve -> check -> mutate -> audit) runs
under the collection locks and never awaits. The informational shell call runs
afterwards, outside the locks; if it fails the mutation stays and the caller
gets SideEffectFailed.
"""
import datetime
import logging
from typing import Optional

from app.errors import NotFound, InsufficientBalance, AlreadyOwned, ValidationError, SideEffectFailed
from app.services.audit_service import AuditService
from app.services.store import EntityKind, Store
from database.models import Backup
from database.models.server import ONLINE, OFFLINE

logger = logging.getLogger(__name__)


def parse_int(value, field: str = "Amount") -> int:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field} must be an integer")


class ActionDispatcher:
    def __init__(self, store: Store, shell, audit: Optional[AuditService] = None):
        self.store = store
        self.shell = shell
        self.audit = audit or AuditService(store)

    # --- helpers ---

    def _resolve(self, kind: EntityKind, entity_id):
        entity = self.store.find(kind, entity_id)
        if entity is None:
            raise NotFound(kind.value, entity_id)
        return entity

    async def _notify(self, text: str, action: str) -> str:
        try:
            return await self.shell.run(text)
        except SideEffectFailed as e:
            logger.warning(f"Side effect for '{action}' failed after mutation: {e.detail}")
            raise SideEffectFailed(e.detail, action=action) from e

    # --- servers ---

    async def start_server(self, server_id) -> str:
        with self.store.locked(EntityKind.SERVER):
            server = self._resolve(EntityKind.SERVER, server_id)
            server.status = ONLINE
            server = self.store.upsert(server)
            name = server.name
            self.audit.log_action("START_SERVER", f"Server {name} started.")
        await self._notify(f"Starting server {name}", "start server")
        return f"Server {name} started!"

    async def stop_server(self, server_id) -> str:
        with self.store.locked(EntityKind.SERVER):
            server = self._resolve(EntityKind.SERVER, server_id)
            server.status = OFFLINE
            server = self.store.upsert(server)
            name = server.name
            self.audit.log_action("STOP_SERVER", f"Server {name} stopped.")
        await self._notify(f"Stopping server {name}", "stop server")
        return f"Server {name} stopped!"

    async def change_version(self, server_id, version) -> str:
        if version is None or str(version).strip() == "":
            raise ValidationError("Version is required")
        version = str(version)
        with self.store.locked(EntityKind.SERVER):
            server = self._resolve(EntityKind.SERVER, server_id)
            server.version = version
            server = self.store.upsert(server)
            name = server.name
            self.audit.log_action("CHANGE_VERSION", f"Server {name} version changed to {version}.")
        return f"Server {name} version changed to {version}!"

    async def adjust_resources(self, server_id, cpu, ram) -> str:
        # No bounds: negative or absurd allocations are accepted as given
        cpu = parse_int(cpu, "CPU")
        ram = parse_int(ram, "RAM")
        with self.store.locked(EntityKind.SERVER):
            server = self._resolve(EntityKind.SERVER, server_id)
            server.resources = {"cpu": cpu, "ram": ram}
            server = self.store.upsert(server)
            name = server.name
            self.audit.log_action("ADJUST_RESOURCES", f"Server {name} resources set to CPU {cpu}%, RAM {ram}MB.")
        return f"Server {name} resources adjusted to CPU {cpu}%, RAM {ram}MB!"

    # --- backups ---

    async def create_backup(self, server_id) -> str:
        with self.store.locked(EntityKind.SERVER, EntityKind.BACKUP):
            server = self._resolve(EntityKind.SERVER, server_id)
            backup = Backup(
                id=self.store.next_id(EntityKind.BACKUP, "backup"),
                server_id=server.id,
                name=f"Backup of {server.name}",
                date=datetime.datetime.now(datetime.timezone.utc),
            )
            backup = self.store.upsert(backup)
            name = server.name
            self.audit.log_action("CREATE_BACKUP", f"{backup.name} created as {backup.id}.")
        await self._notify(f"Creating backup for server {name}", "create backup")
        return f"Backup created for server {name}!"

    async def restore_backup(self, backup_id) -> str:
        # Server fields are not reverted; restore is a notification only
        with self.store.locked(EntityKind.BACKUP):
            backup = self._resolve(EntityKind.BACKUP, backup_id)
            name = backup.name
            self.audit.log_action("RESTORE_BACKUP", f"{name} restore requested.")
        await self._notify(f"Restoring backup {name}", "restore backup")
        return f"Backup {name} restored!"

    # --- catalog ---

    OWNED_ATTRS = {
        EntityKind.ADDON: "purchased_addons",
        EntityKind.THEME: "purchased_themes",
    }

    def purchase(self, user_id, kind: EntityKind, item_id, action: str) -> str:
        """Debit the user once and record the item once. Returns the item name."""
        if not user_id:
            raise ValidationError("An acting user is required")
        owned_attr = self.OWNED_ATTRS[kind]
        with self.store.locked(EntityKind.USER, kind):
            user = self._resolve(EntityKind.USER, user_id)
            item = self._resolve(kind, item_id)
            owned = list(getattr(user, owned_attr) or [])
            if item.id in owned:
                raise AlreadyOwned(kind.value, item.id)
            if user.balance < item.price:
                raise InsufficientBalance(item.price, user.balance)
            user.balance -= item.price
            setattr(user, owned_attr, owned + [item.id])
            user = self.store.upsert(user)
            self.audit.record_transaction("user", user.id, f"purchase_{kind.value}", -item.price)
            self.audit.log_action(action, f"{kind.value.capitalize()} {item.name} purchased for ${item.price}.", username=user.username)
            return item.name

    async def install_addon(self, user_id, addon_id) -> str:
        name = self.purchase(user_id, EntityKind.ADDON, addon_id, "INSTALL_ADDON")
        await self._notify(f"Installing addon {name}", "install addon")
        return f"Addon {name} installed!"

    async def purchase_theme(self, user_id, theme_id) -> str:
        return f"Theme {self.purchase(user_id, EntityKind.THEME, theme_id, 'PURCHASE_THEME')} purchased!"

    # --- operations ---

    async def manage_database(self, database_id) -> str:
        with self.store.locked(EntityKind.DATABASE):
            database = self._resolve(EntityKind.DATABASE, database_id)
            name = database.name
            self.audit.log_action("MANAGE_DATABASE", f"Database {name} management requested.")
        await self._notify(f"Managing database {name}", "manage database")
        return f"Database {name} managed!"

    async def run_task(self, task_id) -> str:
        with self.store.locked(EntityKind.TASK):
            task = self._resolve(EntityKind.TASK, task_id)
            name = task.name
            self.audit.log_action("RUN_TASK", f"Task {name} run manually.")
        await self._notify(f"Running task {name}", "run task")
        return f"Task {name} executed!"

    # --- players ---

    async def kick_player(self, player_id) -> str:
        with self.store.locked(EntityKind.PLAYER):
            player = self._resolve(EntityKind.PLAYER, player_id)
            name = player.name
            self.audit.log_action("KICK_PLAYER", f"Player {name} kicked.")
        await self._notify(f"Kicking player {name}", "kick player")
        return f"Player {name} kicked!"

    async def ban_player(self, player_id) -> str:
        # Player.status is left as is; a ban is a notification only
        with self.store.locked(EntityKind.PLAYER):
            player = self._resolve(EntityKind.PLAYER, player_id)
            name = player.name
            self.audit.log_action("BAN_PLAYER", f"Player {name} banned.")
        await self._notify(f"Banning player {name}", "ban player")
        return f"Player {name} banned!"

    # --- economy ---

    async def add_funds(self, player_id, amount) -> str:
        amount = parse_int(amount)
        name = self._change_balance(player_id, amount, "add")
        return f"Added ${amount} to {name}'s balance."

    async def remove_funds(self, player_id, amount) -> str:
        # No floor: the balance may go negative
        amount = parse_int(amount)
        name = self._change_balance(player_id, -amount, "remove")
        return f"Removed ${amount} from {name}'s balance."

    def _change_balance(self, player_id, delta: int, transaction_type: str) -> str:
        with self.store.locked(EntityKind.PLAYER):
            player = self._resolve(EntityKind.PLAYER, player_id)
            player.balance += delta
            player = self.store.upsert(player)
            self.audit.record_transaction("player", player.id, transaction_type, delta)
            self.audit.log_action(
                f"{transaction_type.upper()}_FUNDS",
                f"Balance of {player.name} changed by {delta:+d} to {player.balance}.",
            )
            return player.name
