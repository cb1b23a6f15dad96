"""Data dictionary: persisting relvar headings and looking relvars up by name.

Only headings are written out. Types and serializers are stored as
references (see :mod:`relvar.types.factory`), which is why they have to be
context-free.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import logging

import yaml

from .attribute import AttributeSpec
from .errors import ConfigurationError
from .folding import DEFAULT_LOCALE
from .heading import Heading
from .relvar import Relvar
from ..types.factory import get_serializer, get_type

logger = logging.getLogger(__name__)


def attribute_to_dict(attribute: AttributeSpec) -> Dict[str, Any]:
    """Convert an attribute to its data dictionary entry."""
    data: Dict[str, Any] = {'name': attribute.name, 'type': attribute.type.to_ref()}
    if attribute.serializer is not None:
        data['serialize'] = attribute.serializer.to_ref()
    if attribute.has_default:
        default = attribute.default
        if attribute.serializer is not None:
            default = attribute.serializer.write(
                attribute.serializer.read(default, attribute.type), attribute.type
            )
        data['default'] = default
    if attribute.description:
        data['description'] = attribute.description
    return data


def attribute_from_dict(data: Mapping[str, Any]) -> AttributeSpec:
    """Create an AttributeSpec from its data dictionary entry."""
    definition = dict(data)
    if 'type' in definition:
        definition['type'] = get_type(definition['type'])
    if 'serialize' in definition:
        definition['serialize'] = get_serializer(definition['serialize'])
    return AttributeSpec.from_dict(definition)


def heading_to_dict(heading: Heading) -> Dict[str, Any]:
    """Convert a heading to a dictionary."""
    return {
        'locale': heading.locale,
        'attributes': [attribute_to_dict(a) for a in heading],
    }


def heading_from_dict(data: Mapping[str, Any], validate_defaults: bool = True) -> Heading:
    """Create a Heading from a dictionary."""
    return Heading.from_definitions(
        [attribute_from_dict(a) for a in data.get('attributes', [])],
        locale=data.get('locale', DEFAULT_LOCALE),
        validate_defaults=validate_defaults,
    )


class RelvarRegistry:
    """Registry of named relvars, persisted as a directory of heading files."""

    def __init__(self):
        """Initialize a new RelvarRegistry."""
        self._relvars: Dict[str, Relvar] = {}

    def add_relvar(self, relvar: Relvar) -> None:
        """Add a relvar to the registry.

        Args:
            relvar: The relvar to add; it must be named.

        Raises:
            ConfigurationError: If the relvar has no name or one with the same
                name already exists
        """
        if not relvar.name:
            raise ConfigurationError("Only named relvars can be registered")
        if relvar.name in self._relvars:
            raise ConfigurationError(f"Relvar '{relvar.name}' already exists in registry")
        self._relvars[relvar.name] = relvar
        logger.debug(f"Added relvar: {relvar.name}")

    def get_relvar(self, name: str) -> Optional[Relvar]:
        """Get a relvar by name.

        Returns:
            The relvar if found, None otherwise
        """
        return self._relvars.get(name)

    def get_all_relvars(self) -> List[Relvar]:
        return list(self._relvars.values())

    @classmethod
    def from_yaml_dir(cls, dir_path: Path) -> 'RelvarRegistry':
        """Load relvar headings from YAML files in a directory.

        Each file holds one relvar: its name, locale and attributes. The
        loaded relvars start with empty bodies.

        Args:
            dir_path: Path to directory containing heading YAML files

        Returns:
            A new RelvarRegistry instance with the loaded relvars
        """
        registry = cls()

        if not dir_path.exists():
            logger.warning(f"Directory does not exist: {dir_path}")
            return registry

        for yaml_file in sorted(dir_path.glob("**/*.yaml")):
            try:
                with open(yaml_file, 'r') as f:
                    data = yaml.safe_load(f)
                if not isinstance(data, dict):
                    raise ConfigurationError(f"Expected a mapping in {yaml_file}")
                relvar = Relvar(heading_from_dict(data), name=data.get('name') or yaml_file.stem)
                registry.add_relvar(relvar)
                logger.info(f"Loaded relvar '{relvar.name}' from {yaml_file}")
            except Exception as e:
                logger.error(f"Error loading relvar from {yaml_file}: {str(e)}")
                raise

        return registry

    def to_yaml_dir(self, dir_path: Path) -> None:
        """Save every relvar heading to a YAML file in a directory.

        Args:
            dir_path: Path to directory where YAML files will be saved
        """
        dir_path.mkdir(parents=True, exist_ok=True)

        for relvar in self._relvars.values():
            file_path = dir_path / f"{relvar.name.lower()}.yaml"
            data = {'name': relvar.name, **heading_to_dict(relvar.heading)}
            with open(file_path, 'w') as f:
                yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
            logger.debug(f"Saved relvar heading to {file_path}")

    def __contains__(self, name: str) -> bool:
        """Check if a relvar exists in the registry."""
        return name in self._relvars

    def __len__(self) -> int:
        return len(self._relvars)

    def __str__(self) -> str:
        return f"RelvarRegistry(relvars={len(self)})"
