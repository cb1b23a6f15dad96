"""Case folding of attribute names.

Every place that compares attribute names (heading construction, candidate
key resolution and tuple lookup) goes through :func:`fold_name` with the
heading's locale.
"""

DEFAULT_LOCALE = "en"

# Languages whose dotted/dotless I do not follow the Unicode default mapping.
_TURKIC_LANGUAGES = {"tr", "az"}


def locale_language(locale: str) -> str:
    """Return the language part of a locale tag, e.g. 'tr' for 'tr_TR.UTF-8'."""
    return locale.replace("-", "_").split("_")[0].split(".")[0].lower()


def fold_name(name: str, locale: str = DEFAULT_LOCALE) -> str:
    """Fold an attribute name for case-insensitive comparison.

    Args:
        name: The attribute name as written by the caller.
        locale: Locale tag controlling language-specific mappings.

    Returns:
        The folded name.

    Raises:
        TypeError: If name is not a string.
    """
    if not isinstance(name, str):
        raise TypeError(f"Attribute names must be strings, got {type(name).__name__}")
    if locale_language(locale) in _TURKIC_LANGUAGES:
        return name.replace("I", "ı").replace("İ", "i").lower()
    return name.casefold()
