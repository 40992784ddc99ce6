# SPDX-License-Identifier: Apache-2.0
"""
Papago Translator - CLI Tool

Translates text with the Papago n2mt API.

Usage:
    papago-translate <text> [options]

Examples:
    papago-translate "Hello"                     # auto-detect -> English
    papago-translate "Hello" -s en -t ko         # English to Korean
    papago-translate "Hello" -t ko --honorific   # Polite Korean
    papago-translate --list-targets -s ja        # Targets available for Japanese
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from papago_translator.errors import PapagoError
from papago_translator.languages import Language, parse_language, target_languages
from papago_translator.translator import Config, Translator

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (default: ``sys.argv[1:]``).

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="papago-translate",
        description="Papago Translation Tool - Translates text with the Naver Papago API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Languages:
  """
        + ", ".join(lang.code for lang in Language)
        + """

Environment Variables (first pair with a value wins):
  TEXT_CAPTURE_PAPAGO_CLIENT_ID / TEXT_CAPTURE_PAPAGO_CLIENT_SECRET
  PAPAGO_CLIENT_ID / PAPAGO_CLIENT_SECRET
  NAVER_CLIENT_ID / NAVER_CLIENT_SECRET
""",
    )

    parser.add_argument(
        "text",
        nargs="?",
        default="",
        help="Text to translate",
    )

    # Language options
    parser.add_argument(
        "-s",
        "--source",
        default="auto",
        help="Source language code (default: auto)",
    )
    parser.add_argument(
        "-t",
        "--target",
        default="en",
        help="Target language code (default: en)",
    )
    parser.add_argument(
        "--honorific",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Request polite phrasing (omitted from the request by default)",
    )
    parser.add_argument(
        "--list-targets",
        action="store_true",
        help="List target languages available for --source and exit",
    )

    # Credential options
    auth_group = parser.add_argument_group("Credentials")
    auth_group.add_argument(
        "--client-id",
        help="Naver client ID (or set one of the *_CLIENT_ID variables)",
    )
    auth_group.add_argument(
        "--client-secret",
        help="Naver client secret (or set one of the *_CLIENT_SECRET variables)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def create_config(args: argparse.Namespace) -> Config:
    """Build credentials from CLI options, falling back to the environment.

    Args:
        args: Command line arguments.

    Returns:
        Config with command line values taking precedence per field.
    """
    env_config = Config.from_env()
    return Config(
        client_id=args.client_id or env_config.client_id,
        client_secret=args.client_secret or env_config.client_secret,
    )


def list_targets(source: str) -> int:
    """Print target language codes for ``source``.

    Prints nothing for "auto", which has no fixed targets.

    Returns:
        Exit code (0: success, 1: unknown source).
    """
    if parse_language(source) is None:
        print(f"Error: Invalid source language: {source}", file=sys.stderr)
        return 1
    for lang in target_languages(source):
        print(lang.code)
    return 0


async def run(args: argparse.Namespace) -> int:
    """Execute a single translation.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    async with Translator(create_config(args)) as translator:
        try:
            translated = await translator.translate(
                args.text, args.source, args.target, honorific=args.honorific
            )
        except PapagoError as e:
            print(f"Error: {e}", file=sys.stderr)
            logger.debug("Translation failed (%s)", e.kind.value, exc_info=args.verbose)
            return 1

    print(translated)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list_targets:
        return list_targets(args.source)

    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
