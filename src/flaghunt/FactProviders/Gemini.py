"""
# Gemini

This file hosts the necessary code to retrieve a short country fact from the Gemini API.
"""

from typing import Optional
from loguru import logger

import requests

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{}:generateContent"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT = 15.0

def build_prompt(country_name: str, was_correct: bool) -> str:
    if was_correct:
        tone = f"The player just correctly identified the flag of {country_name}. Congratulate them briefly, then"
    else:
        tone = f"The player did not recognize the flag of {country_name}. Without scolding them,"

    return (
        f"{tone} share one surprising, fun fact about {country_name}. "
        "Keep it under 40 words and plain text, no markdown."
    )

def extract_text(body: dict) -> Optional[str]:
    try:
        parts = body["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        logger.error("The response holds no candidate content")
        return None

    text = "".join(part.get("text", "") for part in parts if isinstance(part, dict)).strip()
    if not text:
        logger.warning("The candidate content is empty")
        return None

    return text

class GeminiFactProvider:
    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.api_key: str = api_key
        self.model: str = model
        self.timeout: float = timeout

    def fetch_fact(self, country_name: str, was_correct: bool) -> Optional[str]:
        logger.debug("Asking {} for a fact about {}", self.model, country_name)

        try:
            response = requests.post(
                GEMINI_URL.format(self.model),
                headers={"x-goog-api-key": self.api_key},
                json={"contents": [{"parts": [{"text": build_prompt(country_name, was_correct)}]}]},
                timeout=self.timeout
            )
        except requests.RequestException:
            logger.exception("The request to Gemini failed")
            return None

        logger.trace("HTTP Status {}", response.status_code)
        logger.trace("Response Body:\n{}", response.text)

        if response.status_code == 429:
            logger.warning("Gemini rate limit hit, no fact this round")
            return None

        if not response.ok:
            logger.error("The response is not ok (HTTP {})", response.status_code)
            return None

        try:
            body = response.json()
        except requests.exceptions.JSONDecodeError:
            logger.exception(
                "The response JSON appears malformed (response.json raised JSONDecodeError)"
            )
            return None

        return extract_text(body)
