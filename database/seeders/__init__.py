"""
Database Seeders Package
__init__.py for the seeders module
"""
from .user_seeder import seed_users
from .server_seeder import seed_servers
from .player_seeder import seed_players
from .catalog_seeder import seed_catalog
from .operations_seeder import seed_operations
from .bitacora_seeder import seed_bitacora

__all__ = [
    'seed_users',
    'seed_servers',
    'seed_players',
    'seed_catalog',
    'seed_operations',
    'seed_bitacora',
]
