"""Fetch a random joke from JokeAPI and reduce it to text plus category."""

import logging
from typing import Any, Mapping

import requests

from jokecard.schemas import Joke

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "Unknown"
FETCH_FAILED = "Failed to fetch joke"
PARSE_FAILED = "Failed to parse joke"


def build_joke_url(base_url: str, params: Mapping[str, str]) -> str:
    """Append every query parameter verbatim as ``key=value``."""
    pairs = "&".join(f"{key}={value}" for key, value in params.items())
    if not pairs:
        return base_url
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{pairs}"


def _text_field(data: Mapping[str, Any], key: str, fallback: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else fallback


def resolve_joke(data: Mapping[str, Any]) -> Joke:
    if data.get("error") is True:
        logger.warning(
            "joke api rejected request outcome=rejected message=%r",
            data.get("message"),
        )

    if data.get("type") == "twopart":
        setup = _text_field(data, "setup", "No setup found")
        delivery = _text_field(data, "delivery", "No delivery found")
        text = f"{setup}\n\n{delivery}"
    else:
        text = _text_field(data, "joke", "No joke found")

    return Joke(text=text, category=_text_field(data, "category", UNKNOWN_CATEGORY))


class JokeClient:
    def __init__(self, base_url: str, timeout: float):
        self.base_url = base_url
        self.timeout = timeout

    def fetch(self, params: Mapping[str, str]) -> Joke:
        """Never raises; upstream problems come back as placeholder jokes."""
        url = build_joke_url(self.base_url, params)
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("joke fetch failed outcome=degraded url=%s error=%s", url, exc)
            return Joke(text=FETCH_FAILED, category=UNKNOWN_CATEGORY)

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("joke parse failed outcome=degraded url=%s error=%s", url, exc)
            return Joke(text=PARSE_FAILED, category=UNKNOWN_CATEGORY)
        if not isinstance(data, dict):
            logger.warning(
                "joke parse failed outcome=degraded url=%s error=expected object, got %s",
                url,
                type(data).__name__,
            )
            return Joke(text=PARSE_FAILED, category=UNKNOWN_CATEGORY)

        logger.debug("joke fetched url=%s category=%s", url, data.get("category"))
        return resolve_joke(data)
