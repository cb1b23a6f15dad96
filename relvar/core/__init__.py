"""
The relvar.core module contains the heading and tuple model, the validation
pipeline, the Relvar itself, configuration and the data dictionary registry.
"""
from .errors import (
    AmbiguousAttributeError,
    ConfigurationError,
    InvalidValueError,
    MalformedCandidateError,
    MissingAttributeError,
    NullValueError,
    RelvarError,
    UnknownAttributeError,
    ValidationError,
)
from .folding import DEFAULT_LOCALE, fold_name
from .config import RelvarConfig, load_config
from .attribute import AttributeSpec, AttributeType, InstanceOfType, PredicateType, Serializer
from .heading import Heading
from .tuples import Tuple
from .validation import validate
from .relvar import Relvar
from .registry import RelvarRegistry, heading_from_dict, heading_to_dict

__all__ = [
    "RelvarError",
    "ConfigurationError",
    "ValidationError",
    "MissingAttributeError",
    "NullValueError",
    "UnknownAttributeError",
    "AmbiguousAttributeError",
    "InvalidValueError",
    "MalformedCandidateError",
    "DEFAULT_LOCALE",
    "fold_name",
    "RelvarConfig",
    "load_config",
    "AttributeSpec",
    "AttributeType",
    "InstanceOfType",
    "PredicateType",
    "Serializer",
    "Heading",
    "Tuple",
    "validate",
    "Relvar",
    "RelvarRegistry",
    "heading_from_dict",
    "heading_to_dict",
]
