"""Greeting snippet documented in reStructuredText style."""

from __future__ import annotations

import logging

from core.domain.language import Language

logger = logging.getLogger("restdoc_examples.greeting")

_ANONYMOUS = {
    Language.ENGLISH: "Hello, there!",
    Language.SPANISH: "¡Hola!",
}
_NAMED = {
    Language.ENGLISH: "Hello, {name}!",
    Language.SPANISH: "¡Hola, {name}!",
}


def greet(name: str | None = None, language: Language = Language.ENGLISH) -> str:
    """Return a greeting message.

    :param name: The name of the person to greet. When omitted, a generic
        greeting is returned.
    :type name: str or None
    :param language: Language of the greeting.
    :type language: Language
    :return: The greeting message.
    :rtype: str
    :raises ValueError: If ``name`` is given but empty or blank.

    >>> greet()
    'Hello, there!'
    >>> greet("Ada")
    'Hello, Ada!'
    """

    language = Language(language)
    if name is None:
        return _ANONYMOUS[language]

    cleaned = name.strip()
    if not cleaned:
        raise ValueError("name must not be empty")

    logger.debug("greet(%r, %s)", cleaned, language.value)
    return _NAMED[language].format(name=cleaned)
