"""Attribute types, serializers and attribute descriptors.

Types and serializers must be pure, context-free callables so that a heading
can be written to and read back from a data dictionary. Closures are refused
when an attribute is declared; everything else is a caller contract.
"""

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from .errors import ConfigurationError


class _NoDefault:
    """Marker for attributes declared without a default."""

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()

DEFINITION_KEYS = {"name", "type", "serialize", "default", "description"}


def _require_free_function(func: Any, role: str) -> None:
    if not callable(func):
        raise ConfigurationError(f"{role} must be callable, got {func!r}")
    if inspect.isfunction(func) and func.__closure__:
        raise ConfigurationError(
            f"{role} '{func.__qualname__}' captures enclosing variables; "
            "types and serializers must be context-free functions"
        )


def function_ref(obj: Any) -> str:
    """Return the 'module:qualname' reference of an importable function or class."""
    qualname = getattr(obj, "__qualname__", None)
    module = getattr(obj, "__module__", None)
    if not qualname or not module or "<" in qualname:
        raise ConfigurationError(f"{obj!r} is not importable and cannot be persisted")
    return f"{module}:{qualname}"


class AttributeType(ABC):
    """A type predicate for one attribute.

    ``check`` returns True to accept a value, False to reject it, or raises
    TypeError with a message explaining the rejection.
    """

    name: str = "type"

    @abstractmethod
    def check(self, value: Any) -> bool:
        pass

    def to_ref(self) -> Dict[str, Any]:
        """Data dictionary reference for this type."""
        raise ConfigurationError(f"Type '{self.name}' cannot be persisted")

    def __call__(self, value: Any) -> bool:
        return self.check(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class PredicateType(AttributeType):
    """Wraps a module-level predicate function."""

    def __init__(self, func: Callable[[Any], Any]):
        _require_free_function(func, "Type")
        self.func = func
        self.name = getattr(func, "__name__", repr(func))

    def check(self, value: Any) -> bool:
        return bool(self.func(value))

    def to_ref(self) -> Dict[str, Any]:
        return {"ref": function_ref(self.func)}

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PredicateType) and self.func is other.func

    def __hash__(self) -> int:
        return hash(self.func)


class InstanceOfType(AttributeType):
    """Accepts instances of a class, e.g. ``str``."""

    def __init__(self, cls: type):
        self.cls = cls
        self.name = cls.__name__

    def check(self, value: Any) -> bool:
        return isinstance(value, self.cls)

    def to_ref(self) -> Dict[str, Any]:
        return {"ref": function_ref(self.cls)}

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InstanceOfType) and self.cls is other.cls

    def __hash__(self) -> int:
        return hash(self.cls)


def as_attribute_type(type_: Any) -> AttributeType:
    """Wrap a class or predicate function as an AttributeType."""
    if isinstance(type_, AttributeType):
        return type_
    if inspect.isclass(type_):
        return InstanceOfType(type_)
    return PredicateType(type_)


class Serializer(ABC):
    """A read/write pair converting between encoded and domain values."""

    @abstractmethod
    def read(self, value: Any, type_: AttributeType) -> Any:
        """Turn an encoded value into its domain value."""
        pass

    @abstractmethod
    def write(self, value: Any, type_: AttributeType) -> Any:
        """Turn a domain value into its storage representation."""
        pass

    def to_ref(self) -> Dict[str, Any]:
        raise ConfigurationError(f"{self!r} cannot be persisted")


class FunctionSerializer(Serializer):
    """Serializer built from two module-level functions."""

    def __init__(self, read: Callable[[Any, Any], Any], write: Callable[[Any, Any], Any]):
        _require_free_function(read, "Serializer read")
        _require_free_function(write, "Serializer write")
        self._read = read
        self._write = write

    def read(self, value: Any, type_: AttributeType) -> Any:
        return self._read(value, type_)

    def write(self, value: Any, type_: AttributeType) -> Any:
        return self._write(value, type_)

    def to_ref(self) -> Dict[str, Any]:
        return {"read": function_ref(self._read), "write": function_ref(self._write)}

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, FunctionSerializer)
            and self._read is other._read
            and self._write is other._write
        )

    def __hash__(self) -> int:
        return hash((self._read, self._write))

    def __repr__(self) -> str:
        return f"FunctionSerializer(read={self._read!r}, write={self._write!r})"


def as_serializer(serialize: Any) -> Serializer:
    """Build a Serializer from a Serializer, a mapping or a read/write object.

    Raises:
        ConfigurationError: If only one of read and write is given.
    """
    if isinstance(serialize, Serializer):
        return serialize
    if isinstance(serialize, Mapping):
        read, write = serialize.get("read"), serialize.get("write")
    else:
        read, write = getattr(serialize, "read", None), getattr(serialize, "write", None)
    if read is None or write is None:
        missing = "read" if read is None else "write"
        raise ConfigurationError(f"Serializer is missing its '{missing}' function")
    return FunctionSerializer(read, write)


@dataclass(frozen=True)
class AttributeSpec:
    """Descriptor of one heading column.

    Attributes:
        name: Attribute name in its declared casing.
        type: Type predicate for values of this attribute.
        serializer: Optional read/write pair for encoded values.
        default: Value used when a candidate omits the attribute.
        description: Optional description for the data dictionary.
    """
    name: str
    type: AttributeType
    serializer: Optional[Serializer] = None
    default: Any = field(default=NO_DEFAULT, compare=False)
    description: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError(f"Attribute name must be a non-empty string, got {self.name!r}")
        if self.type is None:
            raise ConfigurationError(f"Attribute '{self.name}' has no type")
        object.__setattr__(self, "type", as_attribute_type(self.type))
        if self.serializer is not None:
            object.__setattr__(self, "serializer", as_serializer(self.serializer))
        if self.default is None:
            raise ConfigurationError(f"Attribute '{self.name}' cannot default to null")

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    def write(self, value: Any) -> Any:
        """Serialize a domain value, or return it unchanged without a serializer."""
        if self.serializer is None:
            return value
        return self.serializer.write(value, self.type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'AttributeSpec':
        """Create an AttributeSpec from a definition record.

        Raises:
            ConfigurationError: If the record is missing 'name' or 'type' or
                carries keys other than name, type, serialize, default and
                description.
        """
        unknown = set(data) - DEFINITION_KEYS
        if unknown:
            raise ConfigurationError(f"Unknown attribute definition keys: {sorted(unknown)}")
        if "name" not in data or "type" not in data:
            raise ConfigurationError(f"Attribute definition requires 'name' and 'type': {dict(data)!r}")
        return cls(
            name=data["name"],
            type=data["type"],
            serializer=data.get("serialize"),
            default=data.get("default", NO_DEFAULT),
            description=data.get("description"),
        )

    def __str__(self) -> str:
        return f"{self.name}:{self.type.name}"
