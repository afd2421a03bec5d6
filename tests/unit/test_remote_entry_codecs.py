from __future__ import annotations

import json
from pathlib import Path

import pytest

from errorconf.domain.categories import ErrorCategory
from errorconf.domain.configuration import build_error_configuration
from errorconf.domain.entries import CodeGroup, ErrorConfigurationEntry
from errorconf.domain.errors import EntryDecodeError, InvalidEntryListError
from errorconf.lib.remote import decode_entries, load_entries, parse_entries


def _payload() -> list[dict[str, object]]:
    return [
        {"name": "login", "items": [{"code": 190}, {"code": 102}]},
        {"name": "transient", "items": [{"code": 190, "subcodes": [460, 463, 460]}]},
        {"name": "appNotInstalled", "items": [{"code": 2, "subcodes": []}]},
    ]


@pytest.mark.unit
def test_decode_bare_list_preserves_order_and_groups() -> None:
    entries = decode_entries(json.dumps(_payload()).encode("utf-8"))

    assert entries == [
        ErrorConfigurationEntry.of(ErrorCategory.LOGIN, [CodeGroup(code=190), CodeGroup(code=102)]),
        ErrorConfigurationEntry.of(ErrorCategory.TRANSIENT, [CodeGroup(code=190, subcodes=(460, 463, 460))]),
        ErrorConfigurationEntry.of(ErrorCategory.APP_NOT_INSTALLED, [CodeGroup(code=2)]),
    ]


@pytest.mark.unit
def test_decode_configurations_envelope() -> None:
    entries = decode_entries(json.dumps({"configurations": _payload()}).encode("utf-8"))

    config = build_error_configuration(entries)
    assert config.lookup(190) == ErrorCategory.LOGIN
    assert config.lookup(190, 463) == ErrorCategory.TRANSIENT
    assert config.lookup(2) == ErrorCategory.APP_NOT_INSTALLED


@pytest.mark.unit
def test_entry_with_empty_items_decodes_but_fails_build() -> None:
    entries = parse_entries([{"name": "other", "items": []}])

    assert entries == [ErrorConfigurationEntry(category=ErrorCategory.OTHER)]
    with pytest.raises(InvalidEntryListError):
        build_error_configuration(entries)


@pytest.mark.unit
@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b'"configurations"',
        b'[{"name": "recoverable", "items": [{"code": 1}]}]',
        b'[{"name": "other", "items": [{"code": "one"}]}]',
        b'[{"name": "other"}]',
    ],
)
def test_malformed_payload_raises_decode_error(payload: bytes) -> None:
    with pytest.raises(EntryDecodeError):
        decode_entries(payload)


@pytest.mark.unit
def test_load_entries_from_yaml_and_json_files(tmp_path: Path) -> None:
    yaml_path = tmp_path / "errors.yaml"
    yaml_path.write_text(
        "configurations:\n"
        "  - name: transient\n"
        "    items:\n"
        "      - code: 1\n"
        "        subcodes: [2, 3]\n",
        encoding="utf-8",
    )
    json_path = tmp_path / "errors.json"
    json_path.write_text(json.dumps(_payload()), encoding="utf-8")

    yaml_entries = load_entries(file_path=yaml_path)
    assert yaml_entries == [
        ErrorConfigurationEntry.of(ErrorCategory.TRANSIENT, [CodeGroup(code=1, subcodes=(2, 3))])
    ]
    assert len(load_entries(file_path=json_path)) == 3


@pytest.mark.unit
def test_load_entries_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(EntryDecodeError, match="cannot read"):
        load_entries(file_path=tmp_path / "missing.json")


@pytest.mark.unit
def test_null_subcodes_decode_as_major_only_group() -> None:
    entries = decode_entries(b'[{"name": "other", "items": [{"code": 1, "subcodes": null}]}]')

    assert entries == [ErrorConfigurationEntry.of(ErrorCategory.OTHER, [CodeGroup(code=1)])]
    assert entries[0].groups[0].is_major_only is True


@pytest.mark.unit
def test_unknown_category_name_lists_supported_categories() -> None:
    with pytest.raises(EntryDecodeError) as exc_info:
        decode_entries(b'[{"name": "recoverable", "items": [{"code": 1}]}]')

    message = str(exc_info.value)
    assert "Unsupported error category 'recoverable'" in message
    assert "Supported categories: other, transient, login, appNotInstalled" in message
