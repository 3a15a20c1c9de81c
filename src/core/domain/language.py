"""Language options for user-facing output.

Kept in the domain layer so the greeting snippet, the config and the CLI
share a single source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for greetings."""

    ENGLISH = "en"
    SPANISH = "es"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "Spanish" if self is Language.SPANISH else "English"
