from app.controllers.console_controller import ConsoleController, HELP
from app.services.store import EntityKind


def test_start_and_stop(context, store):
    console = ConsoleController(context)
    assert console.handle("start 1") == "Server Minecraft Server started!"
    assert store.get(EntityKind.SERVER, "1").status == "Online"
    assert console.handle("stop 1") == "Server Minecraft Server stopped!"


def test_errors_are_printed(context):
    console = ConsoleController(context)
    assert console.handle("start 42") == "Server not found"
    assert console.handle("start") == "Server not found"


def test_balance(context):
    console = ConsoleController(context)
    assert console.handle("balance") == "User balance: $100"
    assert console.handle("balance user1") == "User balance: $100"
    assert console.handle("balance nobody") == "User not found"


def test_rename_changes_dashboard_title(context, client):
    console = ConsoleController(context)
    assert console.handle("rename Night Owl") == "Panel renamed to Night Owl"
    assert "Night Owl Control Panel" in client.get("/").text
    assert console.handle("rename") == "Panel renamed to Lonely"


def test_console_and_http_share_state(context, client):
    ConsoleController(context).handle("start 3")
    servers = client.get("/api/state").json()["server"]
    assert [s["status"] for s in servers if s["id"] == "3"] == ["Online"]


def test_help_and_unknown(context):
    console = ConsoleController(context)
    assert console.handle("help") == HELP
    assert console.handle("dance") == "Unknown command"
