"""
Gemini client over the generateContent REST endpoint.
One-shot prompts via generate(); multi-turn chats via start_chat().send_message().
Every failure raises LLMError. Nothing is retried.
"""

from typing import Optional
import requests
from app.config import settings
from app.exceptions import LLMError
from app.utils.json_parser import get_nested
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _turn(role: str, text: str) -> dict:
    return {"role": role, "parts": [{"text": text}]}


class ChatSession:
    """A running conversation. History holds Gemini `contents` entries (user/model)."""

    def __init__(self, client: "GeminiClient", history: Optional[list[dict]] = None):
        self.client = client
        self.history = list(history or [])

    def send_message(self, text: str) -> str:
        contents = self.history + [_turn("user", text)]
        answer = self.client.generate_contents(contents)
        self.history = contents + [_turn("model", answer)]
        return answer


class GeminiClient:
    def __init__(self, api_key: Optional[str], model: str, base_url: str, timeout: int = 60):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "GeminiClient":
        return cls(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            base_url=settings.GEMINI_API_BASE,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str) -> str:
        return self.generate_contents([_turn("user", prompt)])

    def start_chat(self, history: Optional[list[dict]] = None) -> ChatSession:
        return ChatSession(self, history)

    @staticmethod
    def user_turn(text: str) -> dict:
        return _turn("user", text)

    @staticmethod
    def model_turn(text: str) -> dict:
        return _turn("model", text)

    def generate_contents(self, contents: list[dict]) -> str:
        if not self.api_key:
            raise LLMError("GEMINI_API_KEY is not configured")

        logger.debug(f"Gemini request | model={self.model} | turns={len(contents)}")
        try:
            resp = requests.post(
                self.endpoint,
                params={"key": self.api_key},
                json={"contents": contents},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise LLMError(f"Gemini request failed: {e}") from e

        if resp.status_code != 200:
            message = get_nested(self._json(resp), "error", "message", default=resp.text)
            raise LLMError(f"Gemini returned HTTP {resp.status_code}: {message}")

        parts = get_nested(self._json(resp), "candidates", 0, "content", "parts")
        if not parts:
            raise LLMError("Gemini response contained no candidates")
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict))

    @staticmethod
    def _json(resp) -> dict:
        try:
            return resp.json()
        except ValueError:
            return {}
