"""
Player Seeder
Seeds sample players with starting balances
"""
import logging
from app.services.store import EntityKind
from database.models.player import Player

logger = logging.getLogger(__name__)


def seed_players(store):
    if store.count(EntityKind.PLAYER):
        logger.info("Players already exist. Skipping seed.")
        return

    players = [
        Player(id="player1", name="Steve", status="Online", balance=100),
        Player(id="player2", name="Alex", status="Offline", balance=50),
    ]
    for player in players:
        store.upsert(player)
    logger.info(f"Seeded {len(players)} players successfully.")
