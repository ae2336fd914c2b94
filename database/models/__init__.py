# Export Base for Alembic migrations
from .base import Base

# Export all models
from .user import User
from .server import Server
from .player import Player
from .catalog import Addon, Theme
from .backup import Backup
from .operations import ManagedDatabase, Task

# Audit trail
from .bitacora import Bitacora
from .economy import EconomyTransaction
