"""
Lightweight guess validation.

This module answers the question: "Should this input be judged at all?"
A guess is submittable iff:
  - it is a string
  - it has at least one non-whitespace character

Anything else is a no-op for the session: no attempt is spent and no hint is
revealed. Whether the text names a real vehicle is resolution's job, not ours.
"""


def validate_guess(guess: object) -> bool:
    """Return True if `guess` is non-blank text."""
    if not isinstance(guess, str):
        return False
    return bool(guess.strip())
