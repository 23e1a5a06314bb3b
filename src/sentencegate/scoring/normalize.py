"""Lowercasing strategies used before stopword lookup."""

from typing import Callable, Dict

Normalizer = Callable[[str], str]

_TURKIC_UPPER = str.maketrans({"I": "ı", "İ": "i"})


def lower_root(text: str) -> str:
    """Language-neutral Unicode lowercasing."""
    return text.lower()


def lower_turkish(text: str) -> str:
    """Turkish/Azeri lowercasing: dotted and dotless I are distinct letters."""
    return text.translate(_TURKIC_UPPER).lower()


def fold_case(text: str) -> str:
    """Aggressive case folding ("Straße" and "STRASSE" compare equal)."""
    return text.casefold()


NORMALIZERS: Dict[str, Normalizer] = {
    # German has no special lowercase mappings, so the neutral rules apply
    "german": lower_root,
    "root": lower_root,
    "turkish": lower_turkish,
    "casefold": fold_case,
}


def get_normalizer(name: str) -> Normalizer:
    """
    Look up a normalization strategy by name.

    Raises:
        ValueError: If the strategy is unknown
    """
    try:
        return NORMALIZERS[name]
    except KeyError:
        raise ValueError(f"Unknown normalization '{name}', expected one of {sorted(NORMALIZERS)}")
