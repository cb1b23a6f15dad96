"""Heading: the set of attributes a relvar's tuples must carry."""

import logging
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from .attribute import AttributeSpec
from .errors import ConfigurationError, ValidationError
from .folding import DEFAULT_LOCALE, fold_name
from .validation import coerce_value

logger = logging.getLogger(__name__)

AttributeDefinition = Union[AttributeSpec, Mapping[str, Any]]


class Heading:
    """An immutable set of attributes keyed by folded name.

    Declaration order is kept for iteration and display only; two headings
    with the same attributes in a different order are equal.
    """

    __slots__ = ("_attributes", "_locale")

    def __init__(self, attributes: Iterable[AttributeSpec], locale: str = DEFAULT_LOCALE):
        """
        Args:
            attributes: Attribute descriptors in declaration order.
            locale: Locale used to fold attribute names.

        Raises:
            ConfigurationError: If two attributes fold to the same name.
        """
        by_key: Dict[str, AttributeSpec] = {}
        for attribute in attributes:
            key = fold_name(attribute.name, locale)
            if key in by_key:
                raise ConfigurationError(
                    f"Attribute '{attribute.name}' duplicates '{by_key[key].name}' in heading"
                )
            by_key[key] = attribute
        object.__setattr__(self, "_attributes", by_key)
        object.__setattr__(self, "_locale", locale)

    @classmethod
    def from_definitions(
        cls,
        definitions: Iterable[AttributeDefinition],
        locale: str = DEFAULT_LOCALE,
        validate_defaults: bool = True,
    ) -> 'Heading':
        """Build a heading from attribute definition records.

        Args:
            definitions: AttributeSpecs or mappings with name, type and
                optional serialize, default and description.
            locale: Locale used to fold attribute names.
            validate_defaults: Check every default against its attribute now.

        Raises:
            ConfigurationError: On a malformed definition, a duplicate name or
                an inadmissible default.
        """
        attributes = [
            d if isinstance(d, AttributeSpec) else AttributeSpec.from_dict(d)
            for d in definitions
        ]
        heading = cls(attributes, locale=locale)
        if validate_defaults:
            for attribute in heading:
                if attribute.has_default:
                    try:
                        coerce_value(attribute, attribute.default)
                    except ValidationError as e:
                        raise ConfigurationError(
                            f"Default for attribute '{attribute.name}' is not valid: {e}"
                        ) from e
        logger.debug(f"Built heading with attributes: {', '.join(heading.names)}")
        return heading

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def degree(self) -> int:
        return len(self._attributes)

    @property
    def names(self) -> Tuple[str, ...]:
        """Attribute names in declaration order and declared casing."""
        return tuple(a.name for a in self._attributes.values())

    def fold(self, name: str) -> str:
        return fold_name(name, self._locale)

    def lookup(self, name: str) -> Optional[AttributeSpec]:
        """Find an attribute by name, ignoring case."""
        if not isinstance(name, str):
            return None
        return self._attributes.get(self.fold(name))

    def subset(self, names: Iterable[str]) -> 'Heading':
        """Return the heading made of the named attributes.

        Raises:
            KeyError: If a name is not in this heading.
        """
        return Heading([self[name] for name in names], locale=self._locale)

    def __getitem__(self, name: str) -> AttributeSpec:
        attribute = self.lookup(name)
        if attribute is None:
            raise KeyError(name)
        return attribute

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[AttributeSpec]:
        return iter(self._attributes.values())

    def __len__(self) -> int:
        return len(self._attributes)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Heading is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Heading):
            return NotImplemented
        return frozenset(self._attributes.values()) == frozenset(other._attributes.values())

    def __hash__(self) -> int:
        return hash(frozenset(self._attributes.values()))

    def __str__(self) -> str:
        return "{" + ", ".join(str(a) for a in self) + "}"

    def __repr__(self) -> str:
        return f"Heading({self})"
