import asyncio

import pytest

from app.errors import NotFound, InsufficientBalance, AlreadyOwned, ValidationError, SideEffectFailed
from app.services.dispatcher import parse_int
from app.services.store import EntityKind
from database.models import User


def run(coroutine):
    return asyncio.run(coroutine)


# --- servers ---

def test_start_and_stop_server(dispatcher, store, shell):
    assert run(dispatcher.start_server("1")) == "Server Minecraft Server started!"
    assert store.get(EntityKind.SERVER, "1").status == "Online"
    assert run(dispatcher.stop_server("1")) == "Server Minecraft Server stopped!"
    assert store.get(EntityKind.SERVER, "1").status == "Offline"
    assert shell.calls == ["Starting server Minecraft Server", "Stopping server Minecraft Server"]


def test_start_is_idempotent(dispatcher, store):
    run(dispatcher.start_server("2"))
    run(dispatcher.start_server("2"))
    assert store.get(EntityKind.SERVER, "2").status == "Online"


def test_unknown_server_changes_nothing(dispatcher, store, shell):
    before = store.snapshot()
    with pytest.raises(NotFound) as excinfo:
        run(dispatcher.start_server("99"))
    assert excinfo.value.message == "Server not found"
    assert excinfo.value.status_code == 404
    assert store.snapshot() == before
    assert shell.calls == []


def test_change_version(dispatcher, store):
    assert run(dispatcher.change_version("3", "2024.01.01")) == "Server Rust Server version changed to 2024.01.01!"
    assert store.get(EntityKind.SERVER, "3").version == "2024.01.01"


def test_change_version_requires_a_value(dispatcher, store):
    with pytest.raises(ValidationError):
        run(dispatcher.change_version("3", "  "))
    assert store.get(EntityKind.SERVER, "3").version == "2023.10.01"


def test_adjust_resources_accepts_numeric_strings(dispatcher, store):
    run(dispatcher.adjust_resources("1", "80", 4096))
    assert store.get(EntityKind.SERVER, "1").resources == {"cpu": 80, "ram": 4096}


def test_adjust_resources_rejects_garbage(dispatcher, store):
    with pytest.raises(ValidationError) as excinfo:
        run(dispatcher.adjust_resources("1", "lots", 1))
    assert excinfo.value.message == "CPU must be an integer"
    assert store.get(EntityKind.SERVER, "1").resources == {"cpu": 50, "ram": 1024}


# --- backups ---

def test_create_backup_assigns_sequential_ids(dispatcher, store):
    assert run(dispatcher.create_backup("1")) == "Backup created for server Minecraft Server!"
    run(dispatcher.create_backup("1"))
    backups = store.list(EntityKind.BACKUP)
    assert [b.id for b in backups] == ["backup1", "backup2"]
    assert backups[0].server_id == "1"
    assert backups[0].name == "Backup of Minecraft Server"
    assert backups[0].date is not None


def test_restore_backup_does_not_touch_server(dispatcher, store):
    run(dispatcher.create_backup("1"))
    run(dispatcher.change_version("1", "1.21"))
    assert run(dispatcher.restore_backup("backup1")) == "Backup Backup of Minecraft Server restored!"
    assert store.get(EntityKind.SERVER, "1").version == "1.21"


def test_restore_unknown_backup(dispatcher):
    with pytest.raises(NotFound) as excinfo:
        run(dispatcher.restore_backup("backup9"))
    assert excinfo.value.message == "Backup not found"


# --- catalog ---

def test_install_addon_debits_once(dispatcher, store, shell):
    assert run(dispatcher.install_addon("user1", "addon1")) == "Addon EssentialsX installed!"
    user = store.get(EntityKind.USER, "user1")
    assert user.balance == 80
    assert user.purchased_addons == ["addon1"]
    assert shell.calls == ["Installing addon EssentialsX"]


def test_install_addon_twice_is_rejected(dispatcher, store):
    run(dispatcher.install_addon("user1", "addon1"))
    with pytest.raises(AlreadyOwned) as excinfo:
        run(dispatcher.install_addon("user1", "addon1"))
    assert excinfo.value.status_code == 400
    assert store.get(EntityKind.USER, "user1").balance == 80


def test_purchase_theme_without_notification(dispatcher, store, shell):
    assert run(dispatcher.purchase_theme("user1", "theme2")) == "Theme Neon purchased!"
    assert store.get(EntityKind.USER, "user1").purchased_themes == ["theme2"]
    assert shell.calls == []


def test_insufficient_balance_leaves_user_untouched(dispatcher, store):
    with pytest.raises(InsufficientBalance) as excinfo:
        run(dispatcher.purchase_theme("user1", "theme3"))
    assert excinfo.value.message == "Insufficient balance"
    user = store.get(EntityKind.USER, "user1")
    assert user.balance == 100
    assert user.purchased_themes == []


def test_exact_balance_is_enough(dispatcher, store):
    store.get(EntityKind.USER, "user1").balance = 20
    run(dispatcher.install_addon("user1", "addon1"))
    assert store.get(EntityKind.USER, "user1").balance == 0


def test_purchase_for_another_user(dispatcher, store):
    store.upsert(User(id="user2", username="rich", hashed_password="x", balance=1000,
                      role="admin", two_factor_enabled=False, purchased_addons=[], purchased_themes=[]))
    run(dispatcher.purchase_theme("user2", "theme3"))
    assert store.get(EntityKind.USER, "user2").balance == 500
    assert store.get(EntityKind.USER, "user1").balance == 100


def test_purchase_unknown_user_or_item(dispatcher):
    with pytest.raises(NotFound) as excinfo:
        run(dispatcher.install_addon("ghost", "addon1"))
    assert excinfo.value.message == "User not found"
    with pytest.raises(NotFound) as excinfo:
        run(dispatcher.install_addon("user1", "addon9"))
    assert excinfo.value.message == "Addon not found"


def test_purchase_needs_a_user(dispatcher):
    with pytest.raises(ValidationError):
        run(dispatcher.purchase_theme(None, "theme1"))


def test_purchase_is_recorded_in_ledger(dispatcher, store):
    run(dispatcher.install_addon("user1", "addon2"))
    txn = store.list(EntityKind.TRANSACTION)[-1]
    assert (txn.account_kind, txn.account_id, txn.transaction_type, txn.amount) == ("user", "user1", "purchase_addon", -35)


# --- operations and players ---

def test_manage_database_and_run_task(dispatcher, shell):
    assert run(dispatcher.manage_database("db1")) == "Database Minecraft DB managed!"
    assert run(dispatcher.run_task("task2")) == "Task Weekly Restart executed!"
    assert shell.calls == ["Managing database Minecraft DB", "Running task Weekly Restart"]


def test_kick_and_ban_leave_status(dispatcher, store):
    assert run(dispatcher.kick_player("player1")) == "Player Steve kicked!"
    assert run(dispatcher.ban_player("player2")) == "Player Alex banned!"
    assert store.get(EntityKind.PLAYER, "player1").status == "Online"
    assert store.get(EntityKind.PLAYER, "player2").status == "Offline"


# --- economy ---

def test_add_and_remove_funds(dispatcher, store):
    assert run(dispatcher.add_funds("player2", "25")) == "Added $25 to Alex's balance."
    assert store.get(EntityKind.PLAYER, "player2").balance == 75
    assert run(dispatcher.remove_funds("player2", 5)) == "Removed $5 from Alex's balance."
    assert store.get(EntityKind.PLAYER, "player2").balance == 70


def test_remove_funds_can_go_negative(dispatcher, store):
    run(dispatcher.remove_funds("player1", 150))
    assert store.get(EntityKind.PLAYER, "player1").balance == -50


def test_funds_reject_non_integers(dispatcher, store):
    with pytest.raises(ValidationError) as excinfo:
        run(dispatcher.add_funds("player1", "ten"))
    assert excinfo.value.message == "Amount must be an integer"
    assert store.get(EntityKind.PLAYER, "player1").balance == 100
    assert store.count(EntityKind.TRANSACTION) == 0


def test_funds_unknown_player(dispatcher):
    with pytest.raises(NotFound) as excinfo:
        run(dispatcher.add_funds("player9", 1))
    assert excinfo.value.message == "Player not found"


def test_balance_changes_are_audited(dispatcher, store):
    run(dispatcher.add_funds("player1", 10))
    run(dispatcher.remove_funds("player1", 4))
    ledger = [(t.transaction_type, t.amount) for t in store.list(EntityKind.TRANSACTION)]
    assert ledger == [("add", 10), ("remove", -4)]
    assert store.list(EntityKind.LOG)[-1].action == "REMOVE_FUNDS"


@pytest.mark.parametrize("value, expected", [(7, 7), ("7", 7), (" -3 ", -3)])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize("value", [True, None, "1.5", "", 2.5])
def test_parse_int_rejects(value):
    with pytest.raises(ValidationError):
        parse_int(value)


# --- side effects ---

def test_failed_notification_keeps_the_mutation(dispatcher, store, shell):
    shell.fail_with = "boom"
    with pytest.raises(SideEffectFailed) as excinfo:
        run(dispatcher.start_server("1"))
    assert excinfo.value.message == "Failed to start server: boom"
    assert excinfo.value.status_code == 500
    assert store.get(EntityKind.SERVER, "1").status == "Online"
    assert store.list(EntityKind.LOG)[-1].action == "START_SERVER"


def test_every_action_is_logged(dispatcher, store):
    before = store.count(EntityKind.LOG)
    run(dispatcher.start_server("1"))
    run(dispatcher.create_backup("1"))
    run(dispatcher.kick_player("player1"))
    assert [log.action for log in store.list(EntityKind.LOG)[before:]] == ["START_SERVER", "CREATE_BACKUP", "KICK_PLAYER"]


def test_version_and_resource_changes_run_no_shell_command(dispatcher, store, shell):
    shell.fail_with = "boom"
    assert run(dispatcher.change_version("1", "1.21")) == "Server Minecraft Server version changed to 1.21!"
    assert run(dispatcher.adjust_resources("1", 10, 512)) == "Server Minecraft Server resources adjusted to CPU 10%, RAM 512MB!"
    assert shell.calls == []
    assert store.get(EntityKind.SERVER, "1").resources == {"cpu": 10, "ram": 512}
