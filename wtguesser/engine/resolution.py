"""
Guess resolution: does a free-text guess denote the target vehicle?

Order of checks (first hit wins):
  1) fuzzy match against the display name
  2) token-subset match against the display name
  3) for each alias: fuzzy match, then token-subset match

Blank guesses are rejected up front; callers must not count them as attempts
(see validation.validate_guess).
"""

from typing import Iterable

from .matching import is_fuzzy_match, is_token_match, tokenize
from .validation import validate_guess


def resolve_guess(
        guess: str,
        target_name: str,
        target_aliases: Iterable[str],
        convert_roman: bool = False,
) -> bool:
    """
    Decide whether `guess` matches the target.

    Args:
      guess          : raw user input
      target_name    : display name of the target (e.g. "Marder DF-105")
      target_aliases : accepted synonyms (see naming.generate_aliases)
      convert_roman  : map Roman numeral tokens to digits before comparing

    Returns:
      True on a match, False otherwise (including blank input).
    """
    if not validate_guess(guess):
        return False

    if is_fuzzy_match(guess, target_name, convert_roman):
        return True

    guess_tokens = tokenize(guess, convert_roman)
    if is_token_match(guess_tokens, tokenize(target_name, convert_roman)):
        return True

    for alias in target_aliases:
        if is_fuzzy_match(guess, alias, convert_roman):
            return True
        if is_token_match(guess_tokens, tokenize(alias, convert_roman)):
            return True

    return False
