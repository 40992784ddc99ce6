# SPDX-License-Identifier: Apache-2.0
"""Supported languages and the source/target compatibility table.

Papago does not translate between every pair of the languages it knows.
The table below mirrors the pairs the n2mt endpoint accepts and must be
updated by hand when the service changes.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Languages known to the Papago n2mt endpoint.

    Member order is significant: ``parse_language`` returns the first member
    whose code occurs in the input. Re-check substring collisions before
    adding members.
    """

    AUTO = "auto"
    EN = "en"
    KO = "ko"
    JA = "ja"
    ZH_CN = "zh-CN"
    ZH_TW = "zh-TW"
    ES = "es"
    FR = "fr"
    DE = "de"
    RU = "ru"
    PT = "pt"
    IT = "it"
    VI = "vi"
    TH = "th"
    ID = "id"
    HI = "hi"

    @property
    def code(self) -> str:
        """Canonical code sent on the wire."""
        return self.value

    @classmethod
    def concrete(cls) -> list[Language]:
        """All languages except ``AUTO``, in declaration order."""
        return [lang for lang in cls if lang is not cls.AUTO]

    def __str__(self) -> str:
        return self.value


_ALIASES: dict[str, Language] = {
    "zh-cn": Language.ZH_CN,
    "zh-hans": Language.ZH_CN,
    "zh-tw": Language.ZH_TW,
    "zh-hant": Language.ZH_TW,
}

_TARGETS: dict[Language, tuple[Language, ...]] = {
    Language.AUTO: (),
    Language.KO: (
        Language.EN,
        Language.JA,
        Language.ZH_CN,
        Language.ZH_TW,
        Language.ES,
        Language.FR,
        Language.DE,
        Language.RU,
        Language.IT,
        Language.VI,
        Language.TH,
        Language.ID,
    ),
    Language.JA: (
        Language.EN,
        Language.KO,
        Language.ZH_CN,
        Language.ZH_TW,
        Language.FR,
        Language.VI,
        Language.TH,
        Language.ID,
    ),
    Language.ZH_CN: (Language.EN, Language.KO, Language.JA, Language.ZH_TW),
    Language.ZH_TW: (Language.EN, Language.KO, Language.JA, Language.ZH_CN),
    Language.ES: (Language.EN, Language.KO),
    Language.FR: (Language.EN, Language.KO, Language.JA),
    Language.DE: (Language.EN, Language.KO),
    Language.RU: (Language.EN, Language.KO),
}


def parse_language(raw: str | Language | None) -> Language | None:
    """Resolve a loosely written language identifier.

    Matching is case-insensitive. Chinese locale tags ("zh-Hans", "zh-TW", ...)
    are special-cased; anything else resolves to the first language whose code
    is contained in the input, so "en-US" gives ``Language.EN``.

    Args:
        raw: Language identifier, e.g. "ko", "en-US", "ZH-hant".

    Returns:
        Matching Language, or None if nothing matches.
    """
    if isinstance(raw, Language):
        return raw
    if not raw:
        return None

    lowered = raw.lower()
    alias = _ALIASES.get(lowered)
    if alias is not None:
        return alias

    for lang in Language:
        if lang.value.lower() in lowered:
            return lang
    return None


def target_languages(source: str | Language | None) -> list[Language]:
    """Return the target languages Papago accepts for a source language.

    Args:
        source: Source language or identifier string. Strings are resolved
            with ``parse_language``.

    Returns:
        Ordered list of targets. Empty for ``AUTO`` and for identifiers
        that cannot be resolved.
    """
    lang = parse_language(source)
    if lang is None:
        return []

    targets = _TARGETS.get(lang)
    if targets is not None:
        return list(targets)
    return [other for other in Language.concrete() if other is not lang]


def is_supported_pair(source: str | Language | None, target: str | Language | None) -> bool:
    """Check whether Papago lists ``target`` as a valid target for ``source``."""
    lang = parse_language(target)
    return lang is not None and lang in target_languages(source)
