import threading

import pytest

from app.services.store import EntityKind, MemoryStore, serialize
from database.models import Server, Backup
from database.seeder import run_all_seeders, run_specific_seeder


def test_seeded_collections(store):
    assert [s.name for s in store.list(EntityKind.SERVER)] == ["Minecraft Server", "ARK Server", "Rust Server"]
    assert [p.name for p in store.list(EntityKind.PLAYER)] == ["Steve", "Alex"]
    assert store.get(EntityKind.USER, "user1").balance == 100
    assert store.count(EntityKind.ADDON) == 3
    assert store.count(EntityKind.THEME) == 3
    assert store.count(EntityKind.BACKUP) == 0
    assert store.count(EntityKind.LOG) == 2


def test_seeding_twice_does_not_duplicate(store, settings):
    run_all_seeders(store, settings)
    assert store.count(EntityKind.SERVER) == 3
    assert store.count(EntityKind.USER) == 1


def test_unknown_seeder_is_rejected():
    with pytest.raises(ValueError):
        run_specific_seeder(MemoryStore(), "versions")


def test_find_normalizes_ids(store):
    assert store.find(EntityKind.SERVER, 1).name == "Minecraft Server"
    assert store.find(EntityKind.SERVER, None) is None
    assert store.find(EntityKind.SERVER, "99") is None


def test_upsert_replaces_by_id():
    store = MemoryStore()
    store.upsert(Server(id="1", name="Old", type="Minecraft", version="1", status="Offline", cpu=1, ram=1))
    store.upsert(Server(id="1", name="New", type="Minecraft", version="1", status="Offline", cpu=1, ram=1))
    assert store.count(EntityKind.SERVER) == 1
    assert store.get(EntityKind.SERVER, "1").name == "New"


def test_upsert_rejects_foreign_types():
    with pytest.raises(TypeError):
        MemoryStore().upsert(object())


def test_next_id_skips_taken_ids():
    store = MemoryStore()
    store.upsert(Backup(id="backup2", server_id="1", name="Backup of X"))
    # count is 1, so backup2 is the first candidate and is taken
    assert store.next_id(EntityKind.BACKUP, "backup") == "backup3"


def test_snapshot_serializes_every_collection(store):
    snapshot = store.snapshot()
    assert set(snapshot) == {kind.value for kind in EntityKind}
    assert snapshot["server"][0]["resources"] == {"cpu": 50, "ram": 1024}
    assert "hashed_password" not in snapshot["user"][0]


def test_serialize_server(store):
    data = serialize(EntityKind.SERVER, store.get(EntityKind.SERVER, "2"))
    assert data == {
        "id": "2",
        "name": "ARK Server",
        "type": "ARK",
        "version": "337.16",
        "status": "Offline",
        "resources": {"cpu": 70, "ram": 2048},
    }


def test_locked_is_reentrant_and_exclusive(store):
    entered = []

    def contender():
        with store.locked(EntityKind.SERVER):
            entered.append("other")

    with store.locked(EntityKind.PLAYER, EntityKind.SERVER):
        with store.locked(EntityKind.SERVER):
            worker = threading.Thread(target=contender)
            worker.start()
            worker.join(timeout=0.2)
            assert entered == []
    worker.join(timeout=2)
    assert entered == ["other"]
