# SPDX-License-Identifier: Apache-2.0
"""Papago translation client."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

import aiohttp

from papago_translator.errors import (
    ConfigError,
    InputError,
    PapagoError,
    ProtocolError,
    TransportError,
)
from papago_translator.languages import Language, parse_language, target_languages
from papago_translator.request import API_URL, build_body, build_headers
from papago_translator.response import TranslationPayload, classify_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Papago API credentials.

    Empty values are accepted here and rejected when a translation is requested.

    Attributes:
        client_id: Naver application client ID.
        client_secret: Naver application client secret.
    """

    client_id: str = ""
    client_secret: str = ""

    # Checked in order; the first pair with at least one variable set is used
    ENV_VARS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("TEXT_CAPTURE_PAPAGO_CLIENT_ID", "TEXT_CAPTURE_PAPAGO_CLIENT_SECRET"),
        ("PAPAGO_CLIENT_ID", "PAPAGO_CLIENT_SECRET"),
        ("NAVER_CLIENT_ID", "NAVER_CLIENT_SECRET"),
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Load credentials from environment variables.

        Args:
            environ: Mapping to read from (default: ``os.environ``).

        Returns:
            Config built from the first candidate pair where either variable
            is set. The unset side of that pair becomes an empty string.
        """
        env = os.environ if environ is None else environ
        for id_var, secret_var in cls.ENV_VARS:
            client_id = env.get(id_var)
            client_secret = env.get(secret_var)
            if client_id is None and client_secret is None:
                continue
            logger.debug("Using Papago credentials from %s/%s", id_var, secret_var)
            return cls(client_id=client_id or "", client_secret=client_secret or "")
        return cls()


@dataclass
class TranslationResult:
    """Outcome of a scheduled translation.

    Exactly one of ``text`` and ``error`` is set.
    """

    text: str | None = None
    error: PapagoError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the translated text or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.text or ""


DoneCallback = Callable[[TranslationResult], Any]


class Translator:
    """Client for the Papago n2mt translation endpoint.

    Each ``translate`` call issues exactly one POST request. Nothing is
    cached or retried, and configuration is never mutated, so one instance
    can serve concurrent calls.

    Usage:
        async with Translator() as translator:
            text = await translator.translate("Hello", "en", "ko")
    """

    parse_language = staticmethod(parse_language)
    target_languages = staticmethod(target_languages)

    def __init__(
        self,
        config: Config | None = None,
        *,
        api_url: str = API_URL,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize Translator.

        Args:
            config: API credentials. Read from the environment when omitted.
            api_url: Endpoint URL (default: Papago n2mt).
            session: Caller-owned aiohttp session. When omitted, a session is
                created on first use and closed by ``close()``.
        """
        self._config = config if config is not None else Config.from_env()
        self._api_url = api_url
        self._session = session
        self._owns_session = session is None
        self._tasks: set[asyncio.Task[TranslationResult]] = set()

    @property
    def config(self) -> Config:
        return self._config

    async def __aenter__(self) -> Translator:
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this translator created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    def _resolve(self, lang: Language | str | None, role: str) -> Language:
        resolved = parse_language(lang)
        if resolved is None:
            raise InputError(f"Invalid {role} language")
        return resolved

    def _validate(self, text: str) -> None:
        if not self._config.client_id:
            raise ConfigError("NAVER_CLIENT_ID is not set")
        if not self._config.client_secret:
            raise ConfigError("NAVER_CLIENT_SECRET is not set")
        if not text:
            raise InputError("There is no text to translate")

    async def translate_payload(
        self,
        text: str,
        source: Language | str | None,
        target: Language | str | None,
        honorific: bool | None = None,
    ) -> TranslationPayload:
        """Translate text and return the full service payload.

        Args:
            text: Text to translate.
            source: Source language, or an identifier such as "en-US" or "auto".
            target: Target language, or an identifier.
            honorific: Request polite phrasing. Omitted from the request when None.

        Returns:
            TranslationPayload with the translated text and reported languages.

        Raises:
            InputError: Unknown language identifier or empty text.
            ConfigError: Client ID or secret is empty.
            TransportError: The request could not be sent or no response arrived.
            ProtocolError: The HTTP exchange was malformed.
            ServiceError: Non-2xx status code.
            ParseError: Unexpected response body.
        """
        source_lang = self._resolve(source, "source")
        target_lang = self._resolve(target, "target")
        self._validate(text)

        body = build_body(text, source_lang, target_lang, honorific)
        headers = build_headers(self._config.client_id, self._config.client_secret)
        session = await self._ensure_session()

        logger.debug(
            "POST %s (%s -> %s, %d chars)",
            self._api_url,
            source_lang.code,
            target_lang.code,
            len(text),
        )
        try:
            async with session.post(
                self._api_url, data=body.encode("utf-8"), headers=headers
            ) as response:
                status = response.status
                data = await response.read()
        except aiohttp.ClientResponseError as e:
            raise ProtocolError("No response") from e
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise TransportError(str(e) or type(e).__name__) from e

        logger.debug("Papago responded with status %d (%d bytes)", status, len(data))
        return classify_payload(status, data or None)

    async def translate(
        self,
        text: str,
        source: Language | str | None,
        target: Language | str | None,
        honorific: bool | None = None,
    ) -> str:
        """Translate text.

        Language arguments may be Language members or identifier strings;
        strings are resolved with ``parse_language`` before credentials are
        checked.

        Returns:
            Translated text.

        Raises:
            PapagoError: See ``translate_payload``.
        """
        payload = await self.translate_payload(text, source, target, honorific)
        return payload.translated_text

    def submit(
        self,
        text: str,
        source: Language | str | None,
        target: Language | str | None,
        honorific: bool | None = None,
        done: DoneCallback | None = None,
    ) -> asyncio.Task[TranslationResult]:
        """Schedule a translation and return without waiting.

        The returned task resolves once with a TranslationResult; errors are
        stored in the result instead of being raised, and unexpected exceptions
        are wrapped in TransportError. ``done`` is invoked exactly once with the
        same result. Pending tasks are held by the translator until they finish.

        Raises:
            RuntimeError: No running event loop.
        """
        loop = asyncio.get_running_loop()

        async def run() -> TranslationResult:
            try:
                translated = await self.translate(text, source, target, honorific)
            except PapagoError as e:
                result = TranslationResult(error=e)
            except Exception as e:
                logger.debug("Unexpected error during translation", exc_info=True)
                error = TransportError(str(e) or type(e).__name__)
                error.__cause__ = e
                result = TranslationResult(error=error)
            else:
                result = TranslationResult(text=translated)
            if done is not None:
                done(result)
            return result

        task = loop.create_task(run())
        # The loop only keeps a weak reference to tasks
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task
