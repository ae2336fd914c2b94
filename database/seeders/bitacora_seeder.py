"""
Bitacora Seeder
Seeds sample log entries
"""
import datetime
import logging
from app.services.store import EntityKind
from database.models.bitacora import Bitacora

logger = logging.getLogger(__name__)


def seed_bitacora(store):
    """Seed the bitacora with sample data"""
    if store.count(EntityKind.LOG):
        logger.info("Bitacora already has entries. Skipping seed.")
        return

    now = datetime.datetime.now(datetime.timezone.utc)
    logs = [
        Bitacora(id="log1", timestamp=now, username="SYSTEM", action="SYSTEM_INIT", message="Server started successfully."),
        Bitacora(id="log2", timestamp=now, username="SYSTEM", action="PLAYER_JOIN", message="Player Steve joined the game."),
    ]
    for log in logs:
        store.upsert(log)
    logger.info(f"Seeded {len(logs)} log entries successfully.")
