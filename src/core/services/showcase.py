"""Showcase orchestration for the documented examples.

This module runs the checks the reST reference document states in prose
(``add(2, 3) == 5`` and friends) and aggregates them into a
`ShowcaseReport`. The CLI delegates all execution to these helpers, which
keeps printing and progress out of the core logic and makes the runner
reusable from tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from core.domain.arithmetic import add, divide
from core.domain.calculator import Calculator
from core.domain.greeting import greet
from core.domain.language import Language
from core.domain.models import ExampleOutcome, ExampleResult, ShowcaseReport
from core.interfaces.example import DocumentedExample

logger = logging.getLogger("restdoc_examples.showcase")

ResultCallback = Callable[[ExampleResult], None]


class UnknownExampleError(ValueError):
    """Raised when a showcase filter names an example that does not exist."""

    def __init__(self, unknown: Sequence[str], available: Sequence[str]) -> None:
        self.unknown = list(unknown)
        self.available = list(available)
        super().__init__(
            f"Unknown example(s): {', '.join(self.unknown)}. "
            f"Available: {', '.join(self.available)}"
        )


@dataclass
class CallExample:
    """A documented example backed by a zero-argument callable.

    Exactly one of `expected` or `expected_error` describes the documented
    behaviour. When `expected_error` is set, raising that exception type is
    the passing outcome.
    """

    name: str
    expression: str
    func: Callable[[], Any]
    expected: Any = None
    expected_error: type[Exception] | None = None

    def __post_init__(self) -> None:
        # `run` must not fail on its own metadata.
        if not self.name.strip() or not self.expression.strip():
            raise ValueError("example name and expression must not be empty")

    def _expected_repr(self) -> str:
        if self.expected_error is not None:
            return self.expected_error.__name__
        return repr(self.expected)

    def run(self) -> ExampleResult:
        try:
            value = self.func()
        except Exception as exc:
            if self.expected_error is not None and isinstance(exc, self.expected_error):
                return ExampleResult(
                    name=self.name,
                    expression=self.expression,
                    expected=self._expected_repr(),
                    error=str(exc),
                    outcome=ExampleOutcome.PASSED,
                )
            return ExampleResult(
                name=self.name,
                expression=self.expression,
                expected=self._expected_repr(),
                error=f"{type(exc).__name__}: {exc}",
                outcome=ExampleOutcome.RAISED,
            )

        if self.expected_error is not None:
            outcome = ExampleOutcome.FAILED
        else:
            outcome = ExampleOutcome.PASSED if value == self.expected else ExampleOutcome.FAILED

        return ExampleResult(
            name=self.name,
            expression=self.expression,
            expected=self._expected_repr(),
            actual=repr(value),
            outcome=outcome,
        )


def _calculator_add() -> Any:
    return Calculator().add(2, 3)


def _calculator_subtract() -> Any:
    return Calculator().subtract(5, 3)


_WORLD_GREETINGS = {
    Language.ENGLISH: "Hello, World!",
    Language.SPANISH: "¡Hola, World!",
}


def default_examples(language: Language = Language.ENGLISH) -> list[DocumentedExample]:
    """Return the checks stated by the reference document, in reading order."""

    language = Language(language)

    return [
        CallExample("add", "add(2, 3)", lambda: add(2, 3), expected=5),
        CallExample("divide", "divide(4, 2)", lambda: divide(4, 2), expected=2.0),
        CallExample(
            "divide-by-zero",
            "divide(4, 0)",
            lambda: divide(4, 0),
            expected_error=ZeroDivisionError,
        ),
        CallExample("greet", "greet(None)", lambda: greet(None), expected="Hello, there!"),
        CallExample(
            f"greet-{language.value}",
            f"greet('World', language={language.value!r})",
            lambda: greet("World", language=language),
            expected=_WORLD_GREETINGS[language],
        ),
        CallExample("calculator-add", "Calculator().add(2, 3)", _calculator_add, expected=5),
        CallExample(
            "calculator-subtract",
            "Calculator().subtract(5, 3)",
            _calculator_subtract,
            expected=2,
        ),
    ]


def _select(
    examples: Sequence[DocumentedExample], names: Iterable[str] | None
) -> list[DocumentedExample]:
    names = list(names or ())
    if not names:
        return list(examples)

    wanted = [n.strip() for n in names if n and n.strip()]
    if not wanted:
        raise UnknownExampleError([repr(n) for n in names], [ex.name for ex in examples])
    by_name = {ex.name: ex for ex in examples}
    unknown = [n for n in wanted if n not in by_name]
    if unknown:
        raise UnknownExampleError(unknown, list(by_name))

    # Keep the reading order of the document, not the order of the filter.
    wanted_set = set(wanted)
    return [ex for ex in examples if ex.name in wanted_set]


def run_showcase(
    examples: Sequence[DocumentedExample] | None = None,
    *,
    names: Iterable[str] | None = None,
    on_result: ResultCallback | None = None,
) -> ShowcaseReport:
    """Run documented examples and aggregate them into a report.

    Failures of individual examples are recorded, never raised; only an
    invalid `names` filter raises (`UnknownExampleError`).
    """

    pool = list(examples) if examples is not None else default_examples()
    selected = _select(pool, names)

    results: list[ExampleResult] = []
    for example in selected:
        result = example.run()
        if not result.passed:
            logger.warning(
                "example %s %s (expected %s, got %s)",
                result.name,
                result.outcome.value,
                result.expected,
                result.error or result.actual,
            )
        results.append(result)
        if on_result is not None:
            on_result(result)

    return ShowcaseReport(results=results)
