"""Connector options for sentence joining.

This module holds the typed configuration consumed by
:func:`crutches.functional.sentence.to_sentence`. Options are resolved in a
fixed order:

    1. Built-in defaults (the field defaults of :class:`ConnectorOptions`).
    2. Connector options supplied by the caller.
    3. The ``support.array`` section of a caller-supplied locale dictionary,
       which wins over both of the above.

Unknown option keys are rejected before any resolution happens, either by
:func:`validate_options` (raising :class:`InvalidOptionError`) or by the
model itself, which forbids extra fields.

Example:
    >>> options = ConnectorOptions.parse({"two_words_connector": "-"})
    >>> options.resolved().two_words_connector
    '-'
"""

import typing as tp

from pydantic import BaseModel, ConfigDict, Field

from crutches.core.exceptions import InvalidOptionError
from crutches.logger.logger import logger

__all__ = [
    "ALLOWED_KEYS",
    "DEFAULT_CONNECTORS",
    "ConnectorOptions",
    "LocaleDictionary",
    "validate_options",
]

ALLOWED_KEYS: tp.FrozenSet[str] = frozenset(
    {"words_connector", "two_words_connector", "last_word_connector", "locale"}
)


def validate_options(
    options: tp.Mapping[str, tp.Any], allowed_keys: tp.Iterable[str]
) -> None:
    """Reject an options mapping that contains unrecognized keys.

    Args:
        options: The options supplied by the caller.
        allowed_keys: The closed set of keys that are accepted.

    Raises:
        InvalidOptionError: Naming the first unknown key in iteration order.
    """
    allowed = set(allowed_keys)
    unknown = [key for key in options if key not in allowed]
    if unknown:
        logger.debug(f"Rejecting options with unknown keys: {unknown}")
        raise InvalidOptionError(unknown[0])


class ArrayConnectors(BaseModel):
    """Connector words found under ``support.array`` in a locale dictionary."""

    words_connector: tp.Optional[str] = None
    two_words_connector: tp.Optional[str] = None
    last_word_connector: tp.Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class SupportSection(BaseModel):
    array: ArrayConnectors = Field(default_factory=ArrayConnectors)

    model_config = ConfigDict(extra="ignore", frozen=True)


class LocaleDictionary(BaseModel):
    """A locale dictionary of the form ``{"support": {"array": {...}}}``.

    Only the connector words under ``support.array`` are read. Missing
    sections mean "no override" and any other keys are ignored, so a full
    translation file can be passed as is.
    """

    support: SupportSection = Field(default_factory=SupportSection)

    model_config = ConfigDict(extra="ignore", frozen=True)

    def connectors(self) -> tp.Dict[str, str]:
        """Return only the connector words this locale actually defines."""
        return self.support.array.model_dump(exclude_none=True)


class ConnectorOptions(BaseModel):
    """Connector words used to join a list into a sentence."""

    words_connector: str = Field(
        default=", ",
        description="Joins elements of lists with three or more elements.",
    )
    two_words_connector: str = Field(
        default=" and ",
        description="Joins the elements of lists with exactly two elements.",
    )
    last_word_connector: str = Field(
        default=", and ",
        description="Joins the last element of lists with three or more elements.",
    )
    locale: tp.Optional[LocaleDictionary] = Field(
        default=None,
        description="Locale dictionary whose connectors override the others.",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def parse(
        cls, options: tp.Union["ConnectorOptions", tp.Mapping[str, tp.Any], None]
    ) -> "ConnectorOptions":
        """Build options from a plain mapping, rejecting unknown keys first.

        Args:
            options: A mapping of option names to values, an existing
                ``ConnectorOptions`` instance, or ``None`` for the defaults.

        Returns:
            The parsed options.

        Raises:
            InvalidOptionError: If a key is not one of ``ALLOWED_KEYS``.
            pydantic.ValidationError: If a known option has an invalid value.
        """
        if isinstance(options, ConnectorOptions):
            return options
        options = dict(options or {})
        validate_options(options, ALLOWED_KEYS)
        return cls(**options)

    def resolved(self) -> "ConnectorOptions":
        """Apply the locale overlay and return locale-free options."""
        overrides = self.locale.connectors() if self.locale is not None else {}
        return self.model_copy(update={**overrides, "locale": None})


DEFAULT_CONNECTORS: tp.Dict[str, str] = ConnectorOptions().model_dump(
    exclude={"locale"}
)
