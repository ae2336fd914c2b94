import logging
from typing import Optional
from app.services.store import EntityKind
from app.services.auth_service import verify_password, create_access_token

logger = logging.getLogger(__name__)

class AuthController:
    def __init__(self, store, audit=None):
        self.store = store
        self.audit = audit

    def get_user_by_username(self, username: str):
        for user in self.store.list(EntityKind.USER):
            if user.username == username:
                return user
        return None

    def login(self, username: str, password: str) -> Optional[str]:
        """Returns an access token (sub = user id), or None on bad credentials."""
        if not username or not password:
            return None

        username = username.strip()
        user = self.get_user_by_username(username)
        if user is None or not verify_password(password, user.hashed_password):
            logger.info(f"Failed login for {username!r}")
            return None

        access_token = create_access_token(data={"sub": user.id})

        if self.audit:
            self.audit.log_action("LOGIN_SUCCESS", f"User {user.username} logged in.", username=user.username)

        return access_token
