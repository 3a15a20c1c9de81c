"""Two-method calculator class documented in reStructuredText style."""

from __future__ import annotations

import logging

from core.domain.arithmetic import Number, add

logger = logging.getLogger("restdoc_examples.calculator")


class Calculator:
    """A simple calculator that remembers its last result.

    :ivar last_result: Result of the most recent operation, or ``None``
        before the first call.
    :vartype last_result: int or float or None
    """

    def __init__(self) -> None:
        self.last_result: Number | None = None

    def add(self, a: Number, b: Number) -> Number:
        """Add two numbers.

        :param a: The first number.
        :type a: int or float
        :param b: The second number.
        :type b: int or float
        :return: The sum of ``a`` and ``b``.
        :rtype: int or float
        """

        self.last_result = add(a, b)
        return self.last_result

    def subtract(self, a: Number, b: Number) -> Number:
        """Subtract one number from another.

        :param a: The number to subtract from.
        :type a: int or float
        :param b: The number to subtract.
        :type b: int or float
        :return: The difference ``a - b``.
        :rtype: int or float
        """

        logger.debug("subtract(%r, %r)", a, b)
        self.last_result = a - b
        return self.last_result
