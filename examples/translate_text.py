#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Papago translation sample script.

Shows the awaitable and callback styles of the client. Edit the settings
below to try other language pairs.

Usage:
    pip install -e ".[examples]"
    python examples/translate_text.py

Environment variables (loaded from .env in the project root):
    NAVER_CLIENT_ID: Naver application client ID
    NAVER_CLIENT_SECRET: Naver application client secret
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

from papago_translator import (
    Language,
    PapagoError,
    TranslationResult,
    Translator,
    target_languages,
)

PROJECT_ROOT = Path(__file__).parent.parent

# Load .env file from project root (credentials)
load_dotenv(PROJECT_ROOT / ".env")


# =============================================================================
# Settings
# =============================================================================

TEXT = "The weather is nice today."
SOURCE_LANG = "en-US"  # locale tags are accepted
TARGET_LANG = Language.KO
HONORIFIC = True  # polite phrasing (Korean output only)


def on_done(result: TranslationResult) -> None:
    if result.ok:
        print(f"[callback] {result.text}")
    else:
        print(f"[callback] failed ({result.error.kind.value}): {result.error}")


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    print(f"Targets for {SOURCE_LANG}: {', '.join(t.code for t in target_languages(SOURCE_LANG))}")

    async with Translator() as translator:
        try:
            text = await translator.translate(TEXT, SOURCE_LANG, TARGET_LANG, HONORIFIC)
            print(f"[await] {text}")
        except PapagoError as e:
            print(f"[await] failed ({e.kind.value}): {e}")

        # Callback style: returns a task immediately
        task = translator.submit(TEXT, Language.AUTO, Language.JA, done=on_done)
        await task


if __name__ == "__main__":
    asyncio.run(main())
