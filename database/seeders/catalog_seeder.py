"""
Catalog Seeder
Seeds the addon and theme shop
"""
import logging
from app.services.store import EntityKind
from database.models.catalog import Addon, Theme

logger = logging.getLogger(__name__)


def seed_catalog(store):
    if not store.count(EntityKind.ADDON):
        addons = [
            Addon(id="addon1", name="EssentialsX", price=20, description="Core commands, kits and warps."),
            Addon(id="addon2", name="WorldGuard", price=35, description="Region protection and flags."),
            Addon(id="addon3", name="Dynmap", price=50, description="Live web map of your worlds."),
        ]
        for addon in addons:
            store.upsert(addon)
        logger.info(f"Seeded {len(addons)} addons successfully.")

    if not store.count(EntityKind.THEME):
        themes = [
            Theme(id="theme1", name="Midnight", price=15, description="The classic black panel."),
            Theme(id="theme2", name="Neon", price=25, description="High contrast neon accents."),
            Theme(id="theme3", name="Royal Gold", price=500, description="Premium gold trim for every card."),
        ]
        for theme in themes:
            store.upsert(theme)
        logger.info(f"Seeded {len(themes)} themes successfully.")
