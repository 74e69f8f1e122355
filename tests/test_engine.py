import pytest
from wtguesser.engine import (
    normalize, tokenize, levenshtein, is_fuzzy_match, is_token_match, validate_guess,
)

# --- normalize ---
@pytest.mark.parametrize("text,roman,expected", [
    ("Marder 1A3", False, "marder1a3"),
    ("marder1a3", False, "marder1a3"),
    ("T-34-85 (ZiS-53)", False, "t3485zis53"),
    ("Pz.Kpfw. IV", False, "pzkpfwiv"),
    ("Pz.Kpfw. IV", True, "pzkpfw4"),
    ("Strv 103-II", True, "strv1032"),
    ("Vickers Mk.II", True, "vickersmkii"),   # "mk.ii" is not a whole segment
    ("Type 10", True, "type10"),
    ("", True, ""),
])
def test_normalize_golden(text, roman, expected):
    assert normalize(text, roman) == expected

@pytest.mark.parametrize("text", [
    "Marder 1A3", "T-34-85", "Pz.Kpfw. IV Ausf. H", "Strv 103-II",
    "Leopard 2A4", "M4A3E8 (76W)", "", "   ",
])
@pytest.mark.parametrize("roman", [False, True])
def test_normalize_idempotent(text, roman):
    once = normalize(text, roman)
    assert normalize(once, roman) == once

# --- tokenize ---
@pytest.mark.parametrize("text,roman,expected", [
    ("Marder DF-105", False, ["marder", "df", "105"]),
    ("T-34-85 (ZiS-53)", False, ["t", "34", "85", "zis", "53"]),
    ("Pz.Kpfw. IV Ausf. H", True, ["pz.kpfw.", "4", "ausf.", "h"]),
    ("Pz.Kpfw. IV Ausf. H", False, ["pz.kpfw.", "iv", "ausf.", "h"]),
    ("m4a1/m4a2", False, ["m4a1", "m4a2"]),
    ("  ", False, []),
    ("--__//()", True, []),
])
def test_tokenize_golden(text, roman, expected):
    assert tokenize(text, roman) == expected

# --- levenshtein ---
@pytest.mark.parametrize("a,b,expected", [
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("", "abc", 3),
    ("abc", "", 3),
    ("marder", "mardar", 1),
    ("gaz4m", "gazdshk", 4),
])
def test_levenshtein_golden(a, b, expected):
    assert levenshtein(a, b) == expected

def test_levenshtein_properties():
    words = ["", "t34", "t3485", "marder", "leopard", "leopard1", "is2"]
    for a in words:
        assert levenshtein(a, a) == 0
        assert levenshtein("", a) == len(a)
        for b in words:
            assert levenshtein(a, b) == levenshtein(b, a)
            for c in words:
                assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)

# --- fuzzy match ---
@pytest.mark.parametrize("guess,target,roman,expected", [
    ("marder1a3", "marder 1a3", False, True),   # separators only
    ("Marder1A3", "Marder-1A3", False, True),
    ("mardar", "marder", False, True),          # 1 edit, length 6
    ("Chiftan", "Chieftain", False, True),      # 2 edits, length 9
    ("gaz4m", "gazdshk", False, False),         # short shared prefix, 4 edits
    ("is2", "is3", False, False),               # length 3 needs an exact match
    ("leopard", "marder", False, False),
    ("Pz IV", "pz 4", True, True),
    ("Pz IV", "pz 4", False, False),
])
def test_is_fuzzy_match(guess, target, roman, expected):
    assert is_fuzzy_match(guess, target, roman) is expected

# --- token subset ---
def test_is_token_match_subsets():
    assert is_token_match(["marder"], ["marder", "1a3"]) is True
    assert is_token_match(["df", "105"], ["marder", "df", "105"]) is True
    assert is_token_match(["marder", "df", "105", "a1"], ["marder", "df"]) is True
    assert is_token_match(["marder", "1a3"], ["marder", "df", "105"]) is False

def test_is_token_match_empty_never_matches():
    assert is_token_match([], ["x"]) is False
    assert is_token_match(["x"], []) is False
    assert is_token_match([], []) is False

# --- validation ---
def test_validate_guess():
    assert validate_guess("T-34") is True
    assert validate_guess("") is False
    assert validate_guess(" \t\n") is False
    assert validate_guess(None) is False
