"""Contract for runnable documented examples.

Why a Protocol:
- Structural contract (duck typing) without a rigid base class.
- Lets tests and future example sources plug into the showcase runner.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ExampleResult


@runtime_checkable
class DocumentedExample(Protocol):
    """Minimal contract for one documented check.

    Design rules:
    - `run` never raises for the example's own failures; it reports them.
    - `expression` is what the reader of the docs would type.
    """

    name: str
    expression: str

    def run(self) -> ExampleResult:
        """Execute the example and return the normalized result."""

        ...
