"""
Identifier formatting: raw dataset keys -> human names + accepted aliases.

Examples:
  format_name("cn_cm11", "china")          -> "CM11"
  format_name("ussr_t_34_85", "ussr")      -> "T-34-85"
  format_name("germ_flakpanzer_341", "germany") -> "Flakpanzer-341"

Both public functions are pure and total: any string in, some string out.
Unknown prefixes or shapes simply fall through to default capitalization.
"""

import re
from typing import Dict, List

from .tables import (
    COUNTRY_PREFIXES,
    FORCE_UPPERCASE,
    NATION_NAMES,
    ROMAN_MAP,
    ROMAN_TO_ARABIC,
    WORD_OVERRIDES,
)

_DIGIT_RE = re.compile(r"[0-9]")
_ROMAN_WORD_RE = re.compile(r"^(x|ix|iv|v?i{1,3}|v)$", re.IGNORECASE)
_LETTER_SPACE_DIGIT_RE = re.compile(r"([A-Za-z]) ([0-9])")
_DIGIT_SPACE_DIGIT_RE = re.compile(r"([0-9]) ([0-9])")


def get_country_prefix(country: str) -> str:
    """Identifier prefix for a country code (falls back to the code itself)."""
    code = country.lower()
    return COUNTRY_PREFIXES.get(code, code)


def _format_word(word: str) -> str:
    lower = word.lower()

    if lower in WORD_OVERRIDES:
        return WORD_OVERRIDES[lower]
    if lower in FORCE_UPPERCASE:
        return lower.upper()

    # m1, t34, cm11 -> M1, T34, CM11
    if _DIGIT_RE.search(word):
        return word.upper()
    if _ROMAN_WORD_RE.match(word):
        return word.upper()
    if len(word) == 1:
        return word.upper()

    return word[:1].upper() + word[1:].lower()


def format_name(identifier: str, country: str) -> str:
    """
    Turn a technical identifier into a display name.

    Steps:
      1) lowercase and strip the country prefix ("cn_", "germ_", "ussr_", ...)
      2) underscores -> spaces, then case each word independently
      3) re-hyphenate designations: "T 34 85" -> "T-34-85"
    """
    name = identifier.lower()
    code = country.lower()

    prefix = get_country_prefix(country)
    if name.startswith(prefix + "_"):
        name = name[len(prefix) + 1:]
    elif name.startswith(code + "_"):
        name = name[len(code) + 1:]

    name = name.replace("_", " ")
    name = " ".join(_format_word(w) for w in name.split(" "))

    name = _LETTER_SPACE_DIGIT_RE.sub(r"\1-\2", name)
    name = _DIGIT_SPACE_DIGIT_RE.sub(r"\1-\2", name)
    return name


def generate_aliases(name: str, identifier: str) -> List[str]:
    """
    Build the accepted synonyms for a display name.

    The result is de-duplicated, keeps insertion order for stable output,
    always starts with name.lower() and never contains an empty string.
    """
    lowered = name.lower()
    seen: Dict[str, None] = {}

    def add(alias: str) -> None:
        if alias:
            seen.setdefault(alias, None)

    add(lowered)
    add(identifier.lower().replace("_", " "))

    # Identifier without its nation prefix segment
    parts = identifier.split("_")
    if len(parts) > 1:
        add(" ".join(parts[1:]).lower())
        add("".join(parts[1:]).lower())

    add(lowered.replace("-", " "))
    add(lowered.replace("-", ""))
    add(re.sub(r"\s", "", lowered))

    # First word on its own ("T-34-85 Zis-53" -> "t-34-85").
    # Coarse for family prefixes like "M4"; matches are expected to honour it.
    name_parts = name.split(" ")
    if len(name_parts) > 1:
        add(name_parts[0].lower())

    if "pzkpfw" in lowered:
        add(lowered.replace("pzkpfw", "panzer", 1))

    return list(seen)


def nation_name(code: str) -> str:
    """Display name for a country code ("britain" -> "Great Britain")."""
    return NATION_NAMES.get(code.lower(), code[:1].upper() + code[1:])


def to_roman(rank: int) -> str:
    """Rank number -> Roman numeral (1..9); anything else is str(rank)."""
    return ROMAN_MAP.get(rank, str(rank))


def rank_to_number(label: str) -> int:
    """
    Parse a rank label back to an int.

    Accepts "IV", "Rank IV", "rank 4" or "4"; unparseable labels give 0.
    """
    clean = re.sub(r"^rank\s*", "", label.strip(), flags=re.IGNORECASE).strip().lower()
    value = ROMAN_TO_ARABIC.get(clean, clean)
    return int(value) if re.fullmatch(r"[0-9]+", value) else 0


def vehicle_class(vehicle_type: str) -> str:
    """Dataset vehicle type -> hint label ("tank_destroyer" -> "TANK DESTROYER")."""
    return vehicle_type.replace("_", " ").upper()
