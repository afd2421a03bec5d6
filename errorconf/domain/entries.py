from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from errorconf.domain.categories import ErrorCategory

# Entry values describe one remote configuration entry as received.
# They carry no validation: an entry without groups is representable here
# and rejected only when a list of entries is built.


@dataclass(frozen=True)
class CodeGroup:
    code: int
    # Order and repetition are not meaningful; builders treat this as a set.
    subcodes: tuple[int, ...] = ()

    @property
    def is_major_only(self) -> bool:
        return not self.subcodes

    def unique_subcodes(self) -> frozenset[int]:
        return frozenset(self.subcodes)


@dataclass(frozen=True)
class ErrorConfigurationEntry:
    category: ErrorCategory
    groups: tuple[CodeGroup, ...] = field(default_factory=tuple)

    @classmethod
    def of(
        cls,
        category: ErrorCategory,
        groups: Iterable[CodeGroup],
    ) -> ErrorConfigurationEntry:
        return cls(category=category, groups=tuple(groups))
