from .matching import normalize, tokenize, levenshtein, is_fuzzy_match, is_token_match
from .naming import format_name, generate_aliases
from .resolution import resolve_guess
from .validation import validate_guess

__all__ = [
    "normalize",
    "tokenize",
    "levenshtein",
    "is_fuzzy_match",
    "is_token_match",
    "format_name",
    "generate_aliases",
    "resolve_guess",
    "validate_guess",
]
