# SPDX-License-Identifier: Apache-2.0
"""Classification of Papago HTTP responses.

The checks run in a fixed order and stop at the first match. A malformed
response can fail several of them, so the order decides which error the
caller sees.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from papago_translator.errors import ParseError, ServiceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationPayload:
    """Successful n2mt response.

    Attributes:
        translated_text: Translated text.
        source_lang: Language code the service used as source (detected for "auto").
        target_lang: Language code of the translation.
        engine: Engine reported by the service ("NMT", "PRETRANS", ...).
    """

    translated_text: str
    source_lang: str | None = None
    target_lang: str | None = None
    engine: str | None = None


def parse_json_object(body: bytes | None) -> dict[str, Any] | None:
    """Decode ``body`` as a JSON object, or return None."""
    if not body:
        return None
    try:
        data = json.loads(body)
    except (ValueError, TypeError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def parse_error_message(body: bytes) -> str:
    """Extract the service's ``errorMessage``, falling back to the raw body text."""
    data = parse_json_object(body)
    if data is not None and isinstance(data.get("errorMessage"), str):
        return data["errorMessage"]
    return body.decode("utf-8", errors="replace")


def _status_error(status: int, body: bytes | None) -> ServiceError:
    if body:
        data = parse_json_object(body)
        if data is not None and isinstance(data.get("errorMessage"), str):
            return ServiceError(data["errorMessage"], status_code=status)

    if status == 429:
        return ServiceError("Too many requests", status_code=status)

    if body:
        return ServiceError(parse_error_message(body), status_code=status)

    try:
        reason = HTTPStatus(status).phrase
    except ValueError:
        reason = "Unknown"
    return ServiceError(f"Bad status code: {status} {reason}", status_code=status)


def classify_payload(status: int, body: bytes | None) -> TranslationPayload:
    """Interpret an n2mt response.

    Args:
        status: HTTP status code.
        body: Raw response body. Empty bytes are treated as no body.

    Returns:
        TranslationPayload for a well-formed 2xx response.

    Raises:
        ServiceError: Status code outside 200-299.
        ParseError: 2xx response whose body is missing or malformed.
    """
    if not 200 <= status <= 299:
        error = _status_error(status, body)
        logger.debug("Papago returned status %d: %s", status, error.message)
        raise error

    if not body:
        raise ParseError("No data received")

    data = parse_json_object(body)
    if data is None:
        raise ParseError("Could not parse JSON")

    message = data.get("message")
    if not isinstance(message, dict):
        raise ParseError(f"Could not find message in JSON \n{data}")

    result = message.get("result")
    if not isinstance(result, dict):
        raise ParseError("Could not find result in JSON")

    translated = result.get("translatedText")
    if not isinstance(translated, str):
        raise ParseError("Could not find translatedText in JSON")

    return TranslationPayload(
        translated_text=translated,
        source_lang=result.get("srcLangType"),
        target_lang=result.get("tarLangType"),
        engine=result.get("engineType"),
    )


def classify_response(status: int, body: bytes | None) -> str:
    """Interpret an n2mt response and return only the translated text.

    See ``classify_payload`` for the rules and raised errors.
    """
    return classify_payload(status, body).translated_text
