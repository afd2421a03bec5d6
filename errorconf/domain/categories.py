from __future__ import annotations

from enum import Enum
from typing import Literal


class ErrorCategory(str, Enum):
    # Values match the names used by remote configuration payloads.
    OTHER = "other"
    TRANSIENT = "transient"
    LOGIN = "login"
    APP_NOT_INSTALLED = "appNotInstalled"

    def __str__(self) -> str:
        return self.value


RecoveryClassification = Literal["retryable", "login_required", "terminal"]

CANONICAL_CATEGORY_NAMES: tuple[str, ...] = tuple(category.value for category in ErrorCategory)

RETRYABLE_CATEGORIES: frozenset[ErrorCategory] = frozenset({ErrorCategory.TRANSIENT})

LOGIN_REQUIRED_CATEGORIES: frozenset[ErrorCategory] = frozenset({ErrorCategory.LOGIN})


def parse_category(name: str) -> ErrorCategory:
    try:
        return ErrorCategory(name)
    except ValueError:
        supported = ", ".join(CANONICAL_CATEGORY_NAMES)
        raise ValueError(f"Unsupported error category '{name}'. Supported categories: {supported}") from None


def classify_category(category: ErrorCategory) -> RecoveryClassification:
    if category in RETRYABLE_CATEGORIES:
        return "retryable"
    if category in LOGIN_REQUIRED_CATEGORIES:
        return "login_required"
    return "terminal"
