"""
Operations Seeder
Seeds the managed databases and scheduled tasks
"""
import logging
from app.services.store import EntityKind
from database.models.operations import ManagedDatabase, Task

logger = logging.getLogger(__name__)


def seed_operations(store):
    if not store.count(EntityKind.DATABASE):
        store.upsert(ManagedDatabase(id="db1", name="Minecraft DB", type="MySQL"))
        store.upsert(ManagedDatabase(id="db2", name="ARK DB", type="MariaDB"))
        logger.info("Seeded 2 databases successfully.")

    if not store.count(EntityKind.TASK):
        store.upsert(Task(id="task1", name="Daily Backup", schedule="0 0 * * *"))
        store.upsert(Task(id="task2", name="Weekly Restart", schedule="0 0 * * 0"))
        logger.info("Seeded 2 tasks successfully.")
