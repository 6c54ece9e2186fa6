"""Join a list into a natural-language sentence.

Connector words are configurable per call and can be overridden by a locale
dictionary (see :mod:`crutches.core.options` for the resolution order).

Examples:
    >>> to_sentence(["one", "two", "three"])
    'one, two, and three'
    >>> to_sentence(["one", "two"], {"two_words_connector": "-"})
    'one-two'
    >>> es = {
    ...     "support": {
    ...         "array": {
    ...             "words_connector": " o ",
    ...             "two_words_connector": " y ",
    ...             "last_word_connector": " o al menos ",
    ...         }
    ...     }
    ... }
    >>> to_sentence(["uno", "dos", "tres"], locale=es)
    'uno o dos o al menos tres'
"""

import typing as tp

from crutches.core.options import ConnectorOptions
from crutches.functional.sequences import shorten
from crutches.logger.logger import logger

__all__ = ["to_sentence"]


def _render(word: tp.Any) -> str:
    if isinstance(word, (bytes, bytearray)):
        return word.decode("utf-8", errors="replace")
    return str(word)


def to_sentence(
    words: tp.Iterable[tp.Any],
    options: tp.Union[ConnectorOptions, tp.Mapping[str, tp.Any], None] = None,
    **kwargs: tp.Any,
) -> str:
    """Convert ``words`` to a comma-separated sentence.

    The last element is joined with ``last_word_connector`` and lists of
    exactly two elements use ``two_words_connector``.

    Args:
        words: Elements to join. Each is rendered with ``str()``; bytes are
            decoded as UTF-8 with invalid bytes replaced.
        options: Connector options as a mapping or ``ConnectorOptions``.
            Recognized keys are ``words_connector`` (default ``", "``),
            ``two_words_connector`` (default ``" and "``),
            ``last_word_connector`` (default ``", and "``) and ``locale``, a
            dictionary whose ``support.array`` connectors take precedence.
        **kwargs: The same options given as keyword arguments. They override
            entries of ``options``.

    Returns:
        The joined sentence. An empty input gives an empty string.

    Raises:
        InvalidOptionError: If an option key is not recognized.
    """
    if isinstance(options, ConnectorOptions):
        options = options.model_dump(exclude_unset=True)
    connectors = ConnectorOptions.parse({**(options or {}), **kwargs}).resolved()
    logger.debug(f"Resolved sentence connectors: {connectors.model_dump()}")

    words = [_render(word) for word in words]
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]}{connectors.two_words_connector}{words[1]}"

    start_of = connectors.words_connector.join(shorten(words, 1))
    return f"{start_of}{connectors.last_word_connector}{words[-1]}"
