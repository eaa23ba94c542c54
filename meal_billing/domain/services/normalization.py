"""Normalization helpers for names and addresses."""

import unicodedata

from meal_billing.domain.models import Person


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def name_sort_key(name: str) -> tuple[str, str, str]:
    """Return a case-insensitive, accent-folding sort key for names.

    Umlauts sort with their base letter ("Ärger" next to "Anna"); ties are
    broken case-insensitively with accents, then by the raw name so the
    order is total.

    Args:
        name: Person name.

    Returns:
        tuple[str, str, str]: Sort key.
    """
    folded = name.casefold()
    return (_strip_accents(folded), folded, name)


def _join_present(parts) -> str:
    return " ".join(part.strip() for part in parts if part and part.strip())


def format_address(person: Person) -> str:
    """Format a postal address on up to two lines.

    Args:
        person: Person whose address components are joined.

    Returns:
        str: ``"street number"`` and ``"zip city"`` joined by a newline,
        omitting empty lines.
    """
    lines = [
        _join_present((person.street, person.house_number)),
        _join_present((person.zip_code, person.city)),
    ]
    return "\n".join(line for line in lines if line)


__all__ = ["name_sort_key", "format_address"]
