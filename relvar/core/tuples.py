"""Immutable tuple values held in a relvar body."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterator

if TYPE_CHECKING:
    from .heading import Heading


def _freeze(value: Any) -> Hashable:
    """Hashable stand-in for a value, used to compare tuples by content."""
    if isinstance(value, Mapping):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    try:
        hash(value)
    except TypeError:
        return (type(value), repr(value))
    return value


class Tuple(Mapping):
    """A validated row: one value per heading attribute.

    Tuples are only built by the validation pipeline. Lookup by attribute
    name ignores case; iteration yields the heading's declared names.
    """

    __slots__ = ("_heading", "_values", "_identity")

    def __init__(self, heading: 'Heading', values: Dict[str, Any]):
        object.__setattr__(self, "_heading", heading)
        object.__setattr__(self, "_values", dict(values))
        object.__setattr__(
            self, "_identity", frozenset((name, _freeze(v)) for name, v in values.items())
        )

    @property
    def heading(self) -> 'Heading':
        return self._heading

    @property
    def identity(self) -> Hashable:
        """Content key: equal for tuples with equal normalized values."""
        return self._identity

    def __getitem__(self, name: str) -> Any:
        attribute = self._heading.lookup(name)
        if attribute is None:
            raise KeyError(name)
        return self._values[attribute.name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._heading

    def to_dict(self) -> Dict[str, Any]:
        """External representation, with each attribute's ``write`` applied."""
        return {
            attribute.name: attribute.write(self._values[attribute.name])
            for attribute in self._heading
        }

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Tuple is immutable")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tuple):
            return self._identity == other._identity
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._identity)

    def __repr__(self) -> str:
        return f"Tuple({self._values!r})"
