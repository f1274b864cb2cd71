"""
query/normalizer.py
-------------------
Text cleanup applied before document encoding: ASCII lowercasing, then each
of , . ; : ? ! " ' gets a space inserted before it so a plain space split
turns it into its own token. Runs of spaces are kept as they are.
"""

from glove_core.text import ascii_lower

PUNCTUATION = (",", ".", ";", ":", "?", "!", '"', "'")


def normalize(text: str) -> str:
    text = ascii_lower(text)
    for p in PUNCTUATION:
        text = text.replace(p, " " + p)
    return text


def tokenize(text: str) -> list[str]:
    """Normalize and split on single spaces; empty tokens are kept."""
    return normalize(text).split(" ")
