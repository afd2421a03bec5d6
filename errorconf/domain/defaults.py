from __future__ import annotations

from errorconf.domain.categories import ErrorCategory
from errorconf.domain.configuration import ResolvedConfiguration, build_error_configuration
from errorconf.domain.entries import CodeGroup, ErrorConfigurationEntry

# Throttling and temporary service failures.
TRANSIENT_MAJOR_CODES: tuple[int, ...] = (1, 2, 4, 9, 17, 341)

# Session expired or access token invalidated.
LOGIN_MAJOR_CODES: tuple[int, ...] = (102, 190)

# Built-in baseline used until a remote list is available.
# Prepend it to remote entries so remote rules take precedence.
DEFAULT_ERROR_CONFIGURATION_ENTRIES: tuple[ErrorConfigurationEntry, ...] = (
    ErrorConfigurationEntry.of(
        ErrorCategory.TRANSIENT,
        (CodeGroup(code=code) for code in TRANSIENT_MAJOR_CODES),
    ),
    ErrorConfigurationEntry.of(
        ErrorCategory.LOGIN,
        (CodeGroup(code=code) for code in LOGIN_MAJOR_CODES),
    ),
)


def build_default_configuration() -> ResolvedConfiguration:
    return build_error_configuration(DEFAULT_ERROR_CONFIGURATION_ENTRIES)
