# SPDX-License-Identifier: Apache-2.0
"""Request construction for the Papago n2mt endpoint."""

from __future__ import annotations

from urllib.parse import quote, urlencode

from papago_translator.languages import Language

API_URL = "https://openapi.naver.com/v1/papago/n2mt"
CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"


def build_body(
    text: str,
    source: Language,
    target: Language,
    honorific: bool | None = None,
) -> str:
    """Serialize a translation request into a form-encoded body.

    Fields are emitted as source, target, text and, when given, honorific.
    Spaces become ``%20`` and every reserved character is escaped.

    Args:
        text: Text to translate.
        source: Source language.
        target: Target language.
        honorific: Request polite phrasing (Korean output only).

    Returns:
        Percent-encoded query string.
    """
    params: list[tuple[str, str]] = [
        ("source", source.code),
        ("target", target.code),
        ("text", text),
    ]
    if honorific is not None:
        params.append(("honorific", "true" if honorific else "false"))
    return urlencode(params, quote_via=quote, safe="")


def build_headers(client_id: str, client_secret: str) -> dict[str, str]:
    """Build the request headers carrying content type and credentials."""
    return {
        "content-type": CONTENT_TYPE,
        "x-naver-client-id": client_id,
        "x-naver-client-secret": client_secret,
    }
