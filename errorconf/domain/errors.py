from __future__ import annotations

from collections.abc import Sequence


class DomainError(Exception):
    pass


class DomainValidationError(DomainError):
    pass


class InvalidEntryListError(DomainValidationError):
    """Raised when an entry list cannot be built into a configuration.

    The whole list is rejected; no entries are skipped.
    """

    def __init__(self, entry_indexes: Sequence[int]) -> None:
        self.entry_indexes = tuple(entry_indexes)
        positions = ", ".join(str(index) for index in self.entry_indexes)
        super().__init__(f"error configuration entries without code groups at positions: {positions}")


class EntryDecodeError(DomainValidationError):
    pass
