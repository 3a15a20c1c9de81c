"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core a la CLI.
- Serialización estable a JSON para exportar resultados del showcase.

Nota:
- Estos modelos describen *qué* produjo un ejemplo, no *cómo* se ejecutó.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict


class ExampleOutcome(str, Enum):
    """Final state of one documented example."""

    PASSED = "passed"
    FAILED = "failed"
    RAISED = "raised"


class ExampleResult(BaseModel):
    """Result of running a single documented example.

    `expected` and `actual` are stored as `repr` strings so heterogeneous
    values (ints, floats, strings, exception types) share one schema.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Identificador corto del ejemplo (p.ej. 'add').",
    )
    expression: str = Field(
        ...,
        min_length=1,
        description="Expresión tal como aparece en la documentación.",
    )
    expected: str = Field(
        ...,
        description="Valor esperado (repr) o nombre de la excepción esperada.",
    )
    actual: str | None = Field(
        default=None,
        description="Valor obtenido (repr); None si el ejemplo lanzó una excepción.",
    )
    error: str | None = Field(
        default=None,
        description="Mensaje de la excepción capturada, si hubo alguna.",
    )
    outcome: ExampleOutcome = Field(
        ...,
        description="Estado final del ejemplo.",
    )

    @property
    def passed(self) -> bool:
        return self.outcome is ExampleOutcome.PASSED


class ShowcaseReport(BaseModel):
    """Aggregate of every example executed in one showcase run."""

    results: list[ExampleResult] = Field(
        default_factory=list,
        description="Resultados en el orden de ejecución.",
    )
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de generación (UTC).",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return len(self.results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed_count(self) -> int:
        return self.total - self.passed_count

    @property
    def all_passed(self) -> bool:
        return self.failed_count == 0
