# glove_core/text.py
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only; other characters pass through untouched."""
    return text.translate(_ASCII_LOWER)
