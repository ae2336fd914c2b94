"""
Server Seeder
Seeds the sample game servers
"""
import logging
from app.services.store import EntityKind
from database.models.server import Server, OFFLINE

logger = logging.getLogger(__name__)


def seed_servers(store):
    """Seed the servers collection with sample data"""
    if store.count(EntityKind.SERVER):
        logger.info("Servers already exist. Skipping seed.")
        return

    servers = [
        Server(id="1", name="Minecraft Server", type="Minecraft", version="1.20.1", status=OFFLINE, cpu=50, ram=1024),
        Server(id="2", name="ARK Server", type="ARK", version="337.16", status=OFFLINE, cpu=70, ram=2048),
        Server(id="3", name="Rust Server", type="Rust", version="2023.10.01", status=OFFLINE, cpu=60, ram=1536),
    ]
    for server in servers:
        store.upsert(server)
    logger.info(f"Seeded {len(servers)} servers successfully.")
