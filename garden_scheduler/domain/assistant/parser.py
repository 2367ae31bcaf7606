"""
Natural-language intake for the booking assistant.

Sends the scheduler's free-text request and the client list to Gemini and
reads back a JSON booking intent.
"""

import json
import logging
from datetime import date
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ...config import (
    ASSISTANT_TIMEOUT_SECONDS,
    GEMINI_API_KEY,
    GEMINI_API_URL,
    GEMINI_MODEL,
)
from .schemas import BookingIntent

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """
You are an assistant for a garden maintenance scheduling app used in Israel.
Requests are usually written in Hebrew.
Current clients: {clients}.

User request: "{request}"

Extract the scheduling intent into JSON with the fields:
- intent: "schedule" | "query" | "unknown"
- clientId: number (match strictly from the client list, or null)
- date: string (YYYY-MM-DD; today is {today}, resolve phrases like "next Tuesday" from it)
- startTime: string (HH:mm)
- durationMinutes: number (default 60)
- instructions: string (in Hebrew)
- explanation: string (a short conversational confirmation in Hebrew)

Return ONLY valid JSON.
"""


class AssistantError(Exception):
    """Raised when the assistant cannot produce a booking intent"""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def build_prompt(text: str, clients: list, today: date) -> str:
    client_list = ", ".join(f"{c.name} (ID: {c.id}, Area: {c.area})" for c in clients)
    return PROMPT_TEMPLATE.format(clients=client_list, request=text, today=today.isoformat())


class GeminiIntentParser:
    """Extracts booking intents with the Gemini generateContent API"""

    def __init__(
        self,
        api_key: Optional[str] = GEMINI_API_KEY,
        model: str = GEMINI_MODEL,
        base_url: str = GEMINI_API_URL,
        timeout: float = ASSISTANT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def parse(self, text: str, clients: list, today: date) -> BookingIntent:
        """Turn a free-text request into a BookingIntent"""
        if not self.api_key:
            raise AssistantError("Assistant API key not configured", status_code=503)

        payload = {
            "contents": [{"parts": [{"text": build_prompt(text, clients, today)}]}],
            "generationConfig": {"responseMimeType": "application/json"},
        }
        url = f"{self.base_url}/{self.model}:generateContent"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    url, json=payload, headers={"x-goog-api-key": self.api_key}
                )
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"❌ Gemini request failed: {e.response.status_code} {e.response.text[:200]}")
            raise AssistantError("Failed to process assistant request") from e
        except httpx.HTTPError as e:
            logger.error(f"❌ Gemini request error: {e}")
            raise AssistantError("Failed to process assistant request") from e

        return self._read_intent(body)

    @staticmethod
    def _read_intent(body: dict[str, Any]) -> BookingIntent:
        try:
            raw = body["candidates"][0]["content"]["parts"][0]["text"]
            return BookingIntent.model_validate(json.loads(raw or "{}"))
        except (KeyError, IndexError, TypeError, json.JSONDecodeError) as e:
            logger.error(f"❌ Unreadable Gemini response: {e}")
            raise AssistantError("Assistant returned an unreadable response") from e
        except ValidationError as e:
            logger.error(f"❌ Invalid booking intent from Gemini: {e}")
            raise AssistantError("Assistant returned an invalid booking intent") from e
