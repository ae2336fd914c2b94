"""
AI Suggestion Client
Asks an OpenAI compatible completions API for server optimization tips.
"""
import time
import logging
import requests
from typing import Optional

from app.errors import SideEffectFailed

logger = logging.getLogger(__name__)

PROMPT = "Suggest optimizations for a Minecraft server:"


class AiSuggestionService:
    """Client with bounded retry; only network failures are retried."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-3.5-turbo-instruct",
        timeout: float = 10,
        max_retries: int = 3,
        retry_delay: float = 1.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay

    @classmethod
    def from_settings(cls, settings):
        return cls(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            model=settings.openai_model,
            timeout=settings.ai_timeout,
            max_retries=settings.ai_max_retries,
            retry_delay=settings.ai_retry_delay,
        )

    def get_suggestions(self, prompt: str = PROMPT, max_tokens: int = 100) -> str:
        """
        Returns:
            The completion text.

        Raises:
            SideEffectFailed: no API key, a non-retryable error or retries exhausted.
        """
        if not self.api_key:
            raise SideEffectFailed("OPENAI_API_KEY is not configured", action="get AI suggestions")

        url = f"{self.base_url}/completions"
        headers = {"Authorization": f"Bearer {self.api_key}"}
        payload = {"model": self.model, "prompt": prompt, "max_tokens": max_tokens}

        last_error = None
        for attempt in range(1, self.max_retries + 1):
            try:
                response = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
                if response.status_code < 500:
                    response.raise_for_status()
                    try:
                        data = response.json()
                    except ValueError:
                        data = None
                    return self._extract_text(data)
                last_error = f"HTTP {response.status_code}"
            except requests.exceptions.HTTPError as e:
                # 4xx: bad key, bad model... retrying will not help
                logger.error(f"AI suggestion request rejected: {e}")
                raise SideEffectFailed(str(e), action="get AI suggestions")
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                last_error = str(e)

            logger.warning(f"AI suggestion attempt {attempt}/{self.max_retries} failed: {last_error}")
            if attempt < self.max_retries and self.retry_delay:
                time.sleep(self.retry_delay * attempt)

        raise SideEffectFailed(last_error, action="get AI suggestions")

    @staticmethod
    def _extract_text(data) -> str:
        try:
            return data["choices"][0]["text"].strip()
        except (KeyError, IndexError, TypeError, AttributeError):
            logger.error(f"Unexpected completion payload: {data!r}")
            raise SideEffectFailed("unexpected response from the AI provider", action="get AI suggestions")
