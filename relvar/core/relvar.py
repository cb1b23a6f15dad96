"""Relvar: a heading plus a body of validated tuples."""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

import pandas as pd

from .config import RelvarConfig
from .errors import ConfigurationError, ValidationError
from .folding import locale_language
from .heading import AttributeDefinition, Heading
from .tuples import Tuple
from .validation import Candidate, validate

logger = logging.getLogger(__name__)


class Relvar:
    """A typed collection of tuples conforming to a fixed heading.

    The body has set semantics: adding a tuple equal to one already held is
    a no-op. Iteration walks a copy of the body taken when iteration starts,
    so adds made while iterating are not seen by that iteration.
    """

    def __init__(
        self,
        attributes: Union[Heading, Iterable[AttributeDefinition]],
        name: Optional[str] = None,
        locale: Optional[str] = None,
        config: Optional[RelvarConfig] = None,
    ):
        """
        Args:
            attributes: A Heading, or attribute definitions as AttributeSpecs
                or mappings with name, type and optional serialize, default
                and description.
            name: Optional relvar name.
            locale: Locale used to fold attribute names; overrides config.
                Must match the heading's own locale when a Heading is given.
            config: Relvar settings; defaults to RelvarConfig(). A Heading is
                already built, so its settings are not reapplied to it.

        Raises:
            ConfigurationError: If the heading cannot be built, or if locale
                conflicts with the locale of a given Heading.
        """
        self.config = config or RelvarConfig()
        self.name = name
        if isinstance(attributes, Heading):
            if locale is not None and locale_language(locale) != locale_language(attributes.locale):
                raise ConfigurationError(
                    f"Locale '{locale}' conflicts with the heading's locale '{attributes.locale}'"
                )
            self._heading = attributes
        else:
            self._heading = Heading.from_definitions(
                attributes,
                locale=locale or self.config.locale,
                validate_defaults=self.config.validate_defaults,
            )
        self._body: Dict[Any, Tuple] = {}

    @property
    def heading(self) -> Heading:
        return self._heading

    @property
    def degree(self) -> int:
        return self._heading.degree

    @property
    def cardinality(self) -> int:
        return len(self._body)

    def add(self, candidate: Candidate) -> None:
        """Validate a candidate tuple and add it to the body.

        Args:
            candidate: A mapping, or an iterable of (name, value) pairs.

        Raises:
            ValidationError: If the candidate is not admissible. The body is
                left unchanged.
        """
        tuple_ = validate(self._heading, candidate)
        if tuple_.identity in self._body:
            logger.debug(f"Tuple already in {self}: {tuple_!r}")
            return
        self._body[tuple_.identity] = tuple_
        logger.debug(f"Added tuple to {self}: {tuple_!r}")

    def to_records(self) -> List[Dict[str, Any]]:
        """Serialized form of every tuple in the body."""
        return [t.to_dict() for t in self]

    def to_dataframe(self, serialize: bool = False) -> pd.DataFrame:
        """Return the body as a pandas DataFrame, one column per attribute.

        Args:
            serialize: Apply each attribute's ``write`` to the values.
        """
        if serialize:
            rows = self.to_records()
        else:
            rows = [dict(t) for t in self]
        return pd.DataFrame(rows, columns=list(self._heading.names))

    def __iter__(self) -> Iterator[Tuple]:
        return iter(list(self._body.values()))

    def __len__(self) -> int:
        return len(self._body)

    def __contains__(self, candidate: object) -> bool:
        if isinstance(candidate, Tuple):
            return candidate.identity in self._body
        try:
            tuple_ = validate(self._heading, candidate)
        except ValidationError:
            return False
        return tuple_.identity in self._body

    def __str__(self) -> str:
        label = f"'{self.name}'" if self.name else "relvar"
        return f"Relvar({label}, degree={self.degree}, cardinality={self.cardinality})"
