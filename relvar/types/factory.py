# relvar/types/factory.py
import importlib
import logging
from typing import Any, Mapping

from ..core.attribute import AttributeType, Serializer, as_attribute_type, as_serializer
from ..core.errors import ConfigurationError
from .fixnum import FixnumSerializer, FixnumType

logger = logging.getLogger(__name__)

TYPE_REGISTRY = {
    "fixnum": FixnumType,
    # Add other parameterized types here as they are created
}

SERIALIZER_REGISTRY = {
    "fixnum": FixnumSerializer,
}


def import_ref(ref: str) -> Any:
    """
    Imports the object named by a 'module:qualname' reference.

    Raises:
        ConfigurationError: If the reference is malformed or cannot be imported.
    """
    module_name, sep, qualname = ref.partition(":")
    if not sep or not module_name or not qualname:
        raise ConfigurationError(f"Malformed reference '{ref}', expected 'module:qualname'")
    try:
        obj = importlib.import_module(module_name)
        for part in qualname.split("."):
            obj = getattr(obj, part)
    except (ImportError, AttributeError) as e:
        logger.error(f"Cannot resolve reference '{ref}': {e}")
        raise ConfigurationError(f"Cannot resolve reference '{ref}': {e}") from e
    return obj


def _from_registry(registry: Mapping[str, Any], kind: str, data: Mapping[str, Any]) -> Any:
    name = data["name"]
    factory = registry.get(name)
    if factory is None:
        logger.error(f"Unknown {kind}: {name}. Available: {list(registry.keys())}")
        raise ConfigurationError(f"Unknown {kind}: {name}")
    params = data.get("params") or {}
    try:
        return factory(**params)
    except TypeError as e:
        logger.error(f"Error initializing {kind} {name} with params {params}: {e}")
        raise ConfigurationError(f"Failed to initialize {kind} {name}: {e}") from e


def get_type(data: Mapping[str, Any]) -> AttributeType:
    """
    Builds an AttributeType from its data dictionary reference.

    Args:
        data: Either {"name": ..., "params": {...}} for a registered type or
              {"ref": "module:qualname"} for an importable function or class.

    Returns:
        The AttributeType.

    Raises:
        ConfigurationError: If the reference cannot be resolved.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Type reference must be a mapping, got {data!r}")
    if "name" in data:
        return _from_registry(TYPE_REGISTRY, "type", data)
    if "ref" in data:
        return as_attribute_type(import_ref(data["ref"]))
    raise ConfigurationError(f"Type reference needs 'name' or 'ref': {dict(data)!r}")


def get_serializer(data: Mapping[str, Any]) -> Serializer:
    """
    Builds a Serializer from its data dictionary reference.

    Args:
        data: Either {"name": ..., "params": {...}} for a registered serializer
              or {"read": "module:qualname", "write": "module:qualname"}.

    Raises:
        ConfigurationError: If the reference cannot be resolved.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Serializer reference must be a mapping, got {data!r}")
    if "name" in data:
        return _from_registry(SERIALIZER_REGISTRY, "serializer", data)
    refs = {key: import_ref(data[key]) for key in ("read", "write") if key in data}
    return as_serializer(refs)
