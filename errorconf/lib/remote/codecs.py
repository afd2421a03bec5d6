from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import yaml

from errorconf.domain.entries import CodeGroup, ErrorConfigurationEntry
from errorconf.domain.errors import EntryDecodeError
from errorconf.lib.remote.types import RemoteConfigurationEntry, RemoteConfigurationEntryList

_YAML_SUFFIXES = {".yaml", ".yml"}


def to_entry(remote: RemoteConfigurationEntry) -> ErrorConfigurationEntry:
    return ErrorConfigurationEntry.of(
        remote.name,
        (CodeGroup(code=item.code, subcodes=tuple(item.subcodes)) for item in remote.items),
    )


def parse_entries(data: object) -> list[ErrorConfigurationEntry]:
    # Accept both a bare list and the {"configurations": [...]} envelope.
    if isinstance(data, list):
        data = {"configurations": data}
    if not isinstance(data, dict):
        raise EntryDecodeError("error configuration payload must be a list or an object")
    try:
        remote_list = RemoteConfigurationEntryList.model_validate(data)
    except ValidationError as exc:
        raise EntryDecodeError(f"invalid error configuration payload: {exc}") from exc
    return [to_entry(remote) for remote in remote_list.configurations]


def decode_entries(payload: bytes) -> list[ErrorConfigurationEntry]:
    try:
        data = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise EntryDecodeError(f"error configuration payload is not valid JSON: {exc}") from exc
    return parse_entries(data)


def load_entries(*, file_path: str | Path) -> list[ErrorConfigurationEntry]:
    path = Path(file_path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise EntryDecodeError(f"cannot read error configuration file '{path}': {exc}") from exc

    if path.suffix.lower() not in _YAML_SUFFIXES:
        return decode_entries(raw)
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise EntryDecodeError(f"error configuration file '{path}' is not valid YAML: {exc}") from exc
    return parse_entries(data)
