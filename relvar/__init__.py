"""
The relvar package provides typed, validated tuple collections: headings of
case-insensitive attributes, a validation pipeline for candidate tuples and a
data dictionary for persisting headings.
"""
__version__ = "0.1.0"

from .core import (
    AmbiguousAttributeError,
    AttributeSpec,
    AttributeType,
    ConfigurationError,
    Heading,
    InvalidValueError,
    MalformedCandidateError,
    MissingAttributeError,
    NullValueError,
    Relvar,
    RelvarConfig,
    RelvarError,
    RelvarRegistry,
    Serializer,
    Tuple,
    UnknownAttributeError,
    ValidationError,
    validate,
)
from .types import is_fixnum, serialize_fixnum
