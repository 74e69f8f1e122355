"""
Static lookup tables shared by the formatter and the matcher.

Everything here is read-only data:
  - ROMAN_TO_ARABIC : lowercase Roman numeral tokens (i..x) -> digit strings
  - ROMAN_MAP       : rank numbers (1..9) -> Roman numerals
  - COUNTRY_PREFIXES: country code -> identifier prefix used by the dataset
  - NATION_NAMES    : country code -> display name
  - WORD_OVERRIDES  : exact per-word casing fixes
  - FORCE_UPPERCASE : vehicle-family abbreviations always shown upper-case
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

ROMAN_TO_ARABIC: Mapping[str, str] = MappingProxyType({
    "i": "1",
    "ii": "2",
    "iii": "3",
    "iv": "4",
    "v": "5",
    "vi": "6",
    "vii": "7",
    "viii": "8",
    "ix": "9",
    "x": "10",
})

ROMAN_MAP: Mapping[int, str] = MappingProxyType({
    1: "I",
    2: "II",
    3: "III",
    4: "IV",
    5: "V",
    6: "VI",
    7: "VII",
    8: "VIII",
    9: "IX",
})

COUNTRY_PREFIXES: Mapping[str, str] = MappingProxyType({
    "usa": "us",
    "germany": "germ",
    "ussr": "ussr",
    "britain": "uk",
    "japan": "jp",
    "china": "cn",
    "italy": "it",
    "france": "fr",
    "sweden": "sw",
    "israel": "il",
})

NATION_NAMES: Mapping[str, str] = MappingProxyType({
    "usa": "USA",
    "germany": "Germany",
    "ussr": "USSR",
    "britain": "Great Britain",
    "japan": "Japan",
    "china": "China",
    "italy": "Italy",
    "france": "France",
    "sweden": "Sweden",
    "israel": "Israel",
})

WORD_OVERRIDES: Mapping[str, str] = MappingProxyType({
    "us": "US",
    "kwk": "KwK",
    "flak": "FlaK",
    "pak": "PaK",
})

FORCE_UPPERCASE: FrozenSet[str] = frozenset({
    "df", "cm", "pt", "bk", "is", "kv", "cv", "pv", "ikv", "strv",
    "lvkv", "pbv", "pvkv", "sav", "amx", "amd", "aml", "ztz", "zsd",
    "zbd", "pgz", "bmd", "bmp", "btr", "asus", "m1", "m2", "m3", "m4",
    "m60", "t54", "t55", "t62", "t64", "t72", "t80", "t90",
})
