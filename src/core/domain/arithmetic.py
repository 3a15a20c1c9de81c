"""Arithmetic snippets documented in reStructuredText style.

Each function shows the full set of reST fields: ``:param:``, ``:type:``,
``:return:``, ``:rtype:`` and, where it applies, ``:raises:``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("restdoc_examples.arithmetic")

Number = int | float


def add(a: Number, b: Number) -> Number:
    """Add two numbers.

    :param a: The first number.
    :type a: int or float
    :param b: The second number.
    :type b: int or float
    :return: The sum of ``a`` and ``b``.
    :rtype: int or float

    >>> add(2, 3)
    5
    """

    logger.debug("add(%r, %r)", a, b)
    return a + b


def divide(a: Number, b: Number) -> float:
    """Divide one number by another.

    :param a: The dividend.
    :type a: int or float
    :param b: The divisor.
    :type b: int or float
    :return: The quotient of ``a`` divided by ``b``.
    :rtype: float
    :raises ZeroDivisionError: If ``b`` is zero.

    >>> divide(4, 2)
    2.0
    """

    logger.debug("divide(%r, %r)", a, b)
    if b == 0:
        raise ZeroDivisionError("Cannot divide by zero.")
    return float(a / b)
