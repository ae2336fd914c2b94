import logging
from app.services.store import EntityKind
from app.services.auth_service import get_password_hash
from database.models.user import User

logger = logging.getLogger(__name__)

def seed_users(store, username: str = "admin", password: str = "admin", user_id: str = "user1"):
    if store.count(EntityKind.USER):
        logger.info("Users already exist.")
        return

    user = User(
        id=user_id,
        username=username,
        hashed_password=get_password_hash(password),
        balance=100,
        role="admin",
        two_factor_enabled=False,
        purchased_addons=[],
        purchased_themes=[],
    )
    store.upsert(user)
    logger.info(f"Admin user seeded: {username}")
