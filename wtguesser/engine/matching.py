"""
String comparison primitives for guess resolution.

Conventions:
  - normalize : case-, separator- and (optionally) numeral-insensitive form
  - tokenize  : word-level units split on whitespace, '-', '_', '/', '(' and ')'
  - levenshtein: exact edit distance (no early exits; thresholds rely on it)

Fuzzy thresholds scale with length so short names need (near) exact input:

    max(len) > 6  -> up to 2 edits
    max(len) > 3  -> up to 1 edit
    otherwise     -> exact normalized match only

`convert_roman` is enabled for free-text ("hard") play so that "Pz IV" and
"pz 4" compare equal.
"""

import re
from typing import List, Sequence

from .tables import ROMAN_TO_ARABIC

_SEPARATOR_SPLIT_RE = re.compile(r"([\s\-_/()]+)")
_TOKEN_SPLIT_RE = re.compile(r"[\s\-_/()]+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def normalize(text: str, convert_roman: bool = False) -> str:
    """
    Canonical comparison form of `text`.

    Examples:
      normalize("Marder 1A3")          -> "marder1a3"
      normalize("Pz.Kpfw. IV", True)   -> "pzkpfw4"
    """
    processed = text.lower()

    if convert_roman:
        # Separators are kept as their own segments so only whole words convert
        parts = _SEPARATOR_SPLIT_RE.split(processed)
        processed = "".join(ROMAN_TO_ARABIC.get(p, p) for p in parts)

    return _NON_ALNUM_RE.sub("", processed)


def tokenize(text: str, convert_roman: bool = False) -> List[str]:
    """Split `text` into lowercase word tokens, dropping empties."""
    tokens = [t for t in _TOKEN_SPLIT_RE.split(text.lower()) if t]
    if convert_roman:
        tokens = [ROMAN_TO_ARABIC.get(t, t) for t in tokens]
    return tokens


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning `a` into `b`.

    Full DP matrix: rows index `b` (len(b)+1), columns index `a` (len(a)+1).
    """
    matrix: List[List[int]] = [[i] + [0] * len(a) for i in range(len(b) + 1)]
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],  # substitution
                    matrix[i][j - 1],      # insertion
                    matrix[i - 1][j],      # deletion
                )

    return matrix[len(b)][len(a)]


def is_fuzzy_match(guess: str, target: str, convert_roman: bool = False) -> bool:
    """True if `guess` equals `target` after normalization, within the length-scaled edit budget."""
    n_guess = normalize(guess, convert_roman)
    n_target = normalize(target, convert_roman)

    if n_guess == n_target:
        return True

    dist = levenshtein(n_guess, n_target)
    max_length = max(len(n_guess), len(n_target))

    if max_length > 6 and dist <= 2:
        return True
    if max_length > 3 and dist <= 1:
        return True
    return False


def is_token_match(tokens_a: Sequence[str], tokens_b: Sequence[str]) -> bool:
    """
    True if every token of one sequence appears in the other.

    Empty sequences never match. A single shared family token ("m4") is
    enough when one side has only that token.
    """
    if not tokens_a or not tokens_b:
        return False

    return (
        all(t in tokens_b for t in tokens_a)
        or all(t in tokens_a for t in tokens_b)
    )
