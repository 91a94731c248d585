"""Enumerated language and script codes used by detection attributes."""

from __future__ import annotations

import enum


class LanguageCode(enum.Enum):
    """Language identified by its ISO 639-3 code."""

    UNKNOWN = "xxx"
    ARABIC = "ara"
    CHINESE = "zho"
    ENGLISH = "eng"
    ESTONIAN = "est"
    FRENCH = "fra"
    GERMAN = "deu"
    HEBREW = "heb"
    ITALIAN = "ita"
    JAPANESE = "jpn"
    KOREAN = "kor"
    PERSIAN = "fas"
    PORTUGUESE = "por"
    RUSSIAN = "rus"
    SIMPLIFIED_CHINESE = "zhs"
    SPANISH = "spa"
    TRADITIONAL_CHINESE = "zht"
    URDU = "urd"

    @property
    def iso639_3(self) -> str:
        return self.value


class Script(enum.Enum):
    """Writing system identified by its ISO 15924 code."""

    Arab = "Arab"
    Armn = "Armn"
    Cyrl = "Cyrl"
    Grek = "Grek"
    Hang = "Hang"
    Hani = "Hani"
    Hans = "Hans"
    Hant = "Hant"
    Hebr = "Hebr"
    Hira = "Hira"
    Jpan = "Jpan"
    Kana = "Kana"
    Kore = "Kore"
    Latn = "Latn"
    Thai = "Thai"
    # Common characters shared by several scripts.
    Zyyy = "Zyyy"
    # Uncoded script.
    Zzzz = "Zzzz"
