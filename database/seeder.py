"""
Seeder Runner
Main entry point to run all store seeders
"""
import logging
from functools import partial

from database.seeders import (
    seed_users,
    seed_servers,
    seed_players,
    seed_catalog,
    seed_operations,
    seed_bitacora,
)

logger = logging.getLogger(__name__)


def run_all_seeders(store, settings=None):
    """Run all seeders in order. Each one skips a collection that already has records."""
    users = seed_users
    if settings is not None:
        users = partial(
            seed_users,
            username=settings.admin_username,
            password=settings.admin_password,
            user_id=settings.panel_user_id or "user1",
        )

    seeders = [
        ("Users", users),
        ("Servers", seed_servers),
        ("Players", seed_players),
        ("Catalog", seed_catalog),
        ("Operations", seed_operations),
        ("Bitacora", seed_bitacora),
    ]

    for name, seeder_func in seeders:
        logger.info(f"[SEEDER] Running {name} seeder...")
        seeder_func(store)


def run_specific_seeder(store, seeder_name: str):
    """Run a specific seeder by name"""
    seeders = {
        "users": seed_users,
        "servers": seed_servers,
        "players": seed_players,
        "catalog": seed_catalog,
        "operations": seed_operations,
        "bitacora": seed_bitacora,
    }

    seeder_name = seeder_name.lower()
    if seeder_name not in seeders:
        raise ValueError(f"Unknown seeder: {seeder_name}. Available seeders: {', '.join(seeders)}")
    seeders[seeder_name](store)
