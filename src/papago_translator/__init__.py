# SPDX-License-Identifier: Apache-2.0
"""Client for the Naver Papago machine translation API.

Usage:
    from papago_translator import Language, Translator

    async with Translator() as translator:
        text = await translator.translate("Hello", Language.EN, Language.KO)

    # Which targets does Papago accept for Japanese?
    from papago_translator import target_languages
    target_languages("ja")
"""

from papago_translator.errors import (
    ConfigError,
    ErrorKind,
    InputError,
    PapagoError,
    ParseError,
    ProtocolError,
    ServiceError,
    TransportError,
)
from papago_translator.languages import (
    Language,
    is_supported_pair,
    parse_language,
    target_languages,
)
from papago_translator.request import API_URL, build_body
from papago_translator.response import TranslationPayload, classify_payload, classify_response
from papago_translator.translator import Config, TranslationResult, Translator

__all__ = [
    # Languages
    "Language",
    "parse_language",
    "target_languages",
    "is_supported_pair",
    # Wire format
    "API_URL",
    "build_body",
    "classify_payload",
    "classify_response",
    "TranslationPayload",
    # Client
    "Config",
    "Translator",
    "TranslationResult",
    # Exceptions
    "PapagoError",
    "ErrorKind",
    "ConfigError",
    "InputError",
    "TransportError",
    "ProtocolError",
    "ServiceError",
    "ParseError",
]
