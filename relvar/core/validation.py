"""Validation and coercion of candidate tuples against a heading."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, Iterable, Tuple as TypingTuple, Union

from .attribute import AttributeSpec
from .errors import (
    AmbiguousAttributeError,
    InvalidValueError,
    MalformedCandidateError,
    MissingAttributeError,
    NullValueError,
    UnknownAttributeError,
)
from .tuples import Tuple

if TYPE_CHECKING:
    from .heading import Heading

Candidate = Union[Mapping, Iterable[TypingTuple[str, Any]]]


def coerce_value(attribute: AttributeSpec, value: Any) -> Any:
    """Turn a raw value into the accepted domain value for an attribute.

    The serializer's ``read`` runs first, then the type predicate. A
    TypeError from either is reported as InvalidValueError; any other
    exception raised by them propagates unchanged.

    Raises:
        NullValueError: If the value is None.
        InvalidValueError: If the value is rejected.
    """
    if value is None:
        raise NullValueError(attribute.name)

    if attribute.serializer is not None:
        try:
            value = attribute.serializer.read(value, attribute.type)
        except TypeError as e:
            raise InvalidValueError(attribute.name, value, str(e)) from e
        if value is None:
            raise NullValueError(attribute.name)

    try:
        accepted = attribute.type.check(value)
    except TypeError as e:
        raise InvalidValueError(attribute.name, value, str(e)) from e
    if not accepted:
        raise InvalidValueError(attribute.name, value)
    return value


def _fold_candidate(heading: 'Heading', candidate: Candidate) -> Dict[str, TypingTuple[str, Any]]:
    """Key the candidate by folded name, keeping the caller's key for messages."""
    if isinstance(candidate, Mapping):
        items = candidate.items()
    elif isinstance(candidate, (str, bytes)) or not isinstance(candidate, Iterable):
        raise MalformedCandidateError(candidate)
    else:
        items = candidate
    working: Dict[str, TypingTuple[str, Any]] = {}
    for item in items:
        try:
            key, value = item
        except (TypeError, ValueError):
            raise MalformedCandidateError(candidate) from None
        if not isinstance(key, str):
            raise UnknownAttributeError(repr(key))
        folded = heading.fold(key)
        if folded in working:
            raise AmbiguousAttributeError(
                key, f"Attributes '{working[folded][0]}' and '{key}' name the same attribute"
            )
        working[folded] = (key, value)
    return working


def validate(heading: 'Heading', candidate: Candidate) -> Tuple:
    """Validate a candidate tuple and return its normalized, immutable form.

    Args:
        heading: The heading the candidate must conform to.
        candidate: A mapping, or an iterable of (name, value) pairs, with
            keys in any case.

    Returns:
        A Tuple keyed by the heading's declared names.

    Raises:
        MalformedCandidateError: If the candidate is not a mapping or an
            iterable of (name, value) pairs.
        AmbiguousAttributeError: If two candidate keys fold to the same name.
        MissingAttributeError: If an attribute without default is absent.
        NullValueError: If a value is None.
        InvalidValueError: If a value is rejected by its type.
        UnknownAttributeError: If the candidate has keys outside the heading.
    """
    working = _fold_candidate(heading, candidate)
    values: Dict[str, Any] = {}

    for attribute in heading:
        key = heading.fold(attribute.name)
        if key in working:
            _, value = working.pop(key)
        elif attribute.has_default:
            value = attribute.default
        else:
            raise MissingAttributeError(attribute.name)
        values[attribute.name] = coerce_value(attribute, value)

    if working:
        leftover = next(iter(working.values()))[0]
        raise UnknownAttributeError(leftover)

    return Tuple(heading, values)
