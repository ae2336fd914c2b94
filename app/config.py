import os
import shlex
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Runtime configuration, read from the environment (and .env)."""

    def __init__(self, **overrides):
        self.app_version = os.getenv("APP_VERSION", "0.1.0")
        self.panel_name = os.getenv("PANEL_NAME", "Lonely")
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "3000"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        # memory | sql
        self.store_backend = os.getenv("STORE_BACKEND", "memory").lower()

        # Informational side effects
        self.shell_command = shlex.split(os.getenv("SHELL_COMMAND", "echo"))
        self.shell_timeout = float(os.getenv("SHELL_TIMEOUT_SECONDS", "5"))

        # Identity used when a request carries neither a token nor X-User-Id
        self.panel_user_id = os.getenv("PANEL_USER_ID", "user1")
        self.admin_username = os.getenv("PANEL_ADMIN_USERNAME", "admin")
        self.admin_password = os.getenv("PANEL_ADMIN_PASSWORD", "admin")

        # AI suggestions (OpenAI compatible completions API)
        self.openai_api_key = os.getenv("OPENAI_API_KEY", "")
        self.openai_base_url = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
        self.openai_model = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo-instruct")
        self.ai_timeout = float(os.getenv("AI_TIMEOUT_SECONDS", "10"))
        self.ai_max_retries = int(os.getenv("AI_MAX_RETRIES", "3"))
        self.ai_retry_delay = float(os.getenv("AI_RETRY_DELAY_SECONDS", "1"))

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)


def configure_logging(level: str = "INFO"):
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        root.setLevel(level)
