"""Error taxonomy for heading construction and tuple validation."""

from typing import Any, Optional


class RelvarError(Exception):
    """Base class for every error raised by the relvar core."""


class ConfigurationError(RelvarError, ValueError):
    """Raised when a heading or attribute definition is malformed."""


class ValidationError(RelvarError, ValueError):
    """Raised when a candidate tuple is not admissible.

    Attributes:
        attribute: Name of the offending attribute, or None when the
            candidate as a whole is rejected.
    """

    def __init__(self, attribute: Optional[str], message: Optional[str] = None):
        self.attribute = attribute
        super().__init__(message or self.default_message())

    def default_message(self) -> str:
        return f"Attribute '{self.attribute}' is not valid"


class MissingAttributeError(ValidationError):
    def default_message(self) -> str:
        return f"Attribute '{self.attribute}' is required and has no default"


class NullValueError(ValidationError):
    def default_message(self) -> str:
        return f"Attribute '{self.attribute}' cannot be null"


class UnknownAttributeError(ValidationError):
    def default_message(self) -> str:
        return f"Attribute '{self.attribute}' is not part of the heading"


class AmbiguousAttributeError(ValidationError):
    def default_message(self) -> str:
        return f"Attribute '{self.attribute}' is supplied more than once"


class MalformedCandidateError(ValidationError):
    """Raised when a candidate is neither a mapping nor (name, value) pairs."""

    def __init__(self, candidate: Any, message: Optional[str] = None):
        self.candidate = candidate
        super().__init__(None, message)

    def default_message(self) -> str:
        return (
            "Candidate tuple must be a mapping or an iterable of (name, value) pairs, "
            f"got {self.candidate!r}"
        )


class InvalidValueError(ValidationError):
    """Raised when a type predicate rejects a value.

    Attributes:
        attribute: Name of the offending attribute.
        value: The rejected value.
    """

    def __init__(self, attribute: str, value: Any, message: Optional[str] = None):
        self.value = value
        super().__init__(attribute, message)

    def default_message(self) -> str:
        return f"Value {self.value!r} is not valid for attribute '{self.attribute}'"
