from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
import logging
from types import MappingProxyType

from errorconf.domain.categories import ErrorCategory
from errorconf.domain.entries import ErrorConfigurationEntry
from errorconf.domain.errors import InvalidEntryListError

logger = logging.getLogger("errorconf")


@dataclass(frozen=True)
class ConfigurationKey:
    major_code: int
    # None addresses the major code as a whole.
    minor_code: int | None = None

    def major_level(self) -> ConfigurationKey:
        return ConfigurationKey(major_code=self.major_code)


class ResolvedConfiguration(Mapping[ConfigurationKey, ErrorCategory]):
    """Immutable (major code, minor code) -> category table.

    Produced by build_error_configuration(). Lookups match keys exactly:
    lookup(190, 460) never falls back to lookup(190). Callers wanting
    "specific, then general" semantics issue both lookups in that order,
    or use resolve_category().
    """

    __slots__ = ("_table",)

    def __init__(self, table: Mapping[ConfigurationKey, ErrorCategory] | None = None) -> None:
        self._table: Mapping[ConfigurationKey, ErrorCategory] = MappingProxyType(dict(table or {}))

    def lookup(self, major_code: int, minor_code: int | None = None) -> ErrorCategory | None:
        return self._table.get(ConfigurationKey(major_code=major_code, minor_code=minor_code))

    def __getitem__(self, key: ConfigurationKey) -> ErrorCategory:
        return self._table[key]

    def __iter__(self) -> Iterator[ConfigurationKey]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ResolvedConfiguration({dict(self._table)!r})"

    def as_dict(self) -> dict[ConfigurationKey, ErrorCategory]:
        return dict(self._table)


def build_error_configuration(entries: Sequence[ErrorConfigurationEntry]) -> ResolvedConfiguration:
    """Fold an ordered entry list into a resolved configuration.

    Later entries override earlier ones at equal specificity. A major-only
    group always sets the major-level key; a minor-specific group sets its
    (major, minor) keys and only seeds the major-level key when nothing has
    written it yet.

    Raises InvalidEntryListError if any entry has no code groups.
    """
    empty_indexes = [index for index, entry in enumerate(entries) if not entry.groups]
    if empty_indexes:
        logger.warning(
            "error configuration rejected",
            extra={"entries": len(entries), "entry_indexes": empty_indexes},
        )
        raise InvalidEntryListError(empty_indexes)

    table: dict[ConfigurationKey, ErrorCategory] = {}
    for entry in entries:
        for group in entry.groups:
            if group.is_major_only:
                table[ConfigurationKey(major_code=group.code)] = entry.category
                continue
            for subcode in sorted(group.unique_subcodes()):
                key = ConfigurationKey(major_code=group.code, minor_code=subcode)
                table[key] = entry.category
                # Seeds the major-level key only if nothing has written it yet.
                table.setdefault(key.major_level(), entry.category)

    configuration = ResolvedConfiguration(table)
    logger.info(
        "error configuration built",
        extra={"entries": len(entries), "keys": len(configuration)},
    )
    return configuration


def resolve_category(
    configuration: ResolvedConfiguration,
    major_code: int,
    minor_code: int | None = None,
    *,
    default: ErrorCategory | None = None,
) -> ErrorCategory | None:
    if minor_code is not None:
        category = configuration.lookup(major_code, minor_code)
        if category is not None:
            return category
    category = configuration.lookup(major_code)
    if category is not None:
        return category
    return default
