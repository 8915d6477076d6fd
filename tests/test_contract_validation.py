from __future__ import annotations

import shutil
from pathlib import Path

from contract.validation import validate_metadata

FIXTURE = Path(__file__).parent / "fixtures" / "metadata.jsonl"


def _write_lines(path: Path, *lines: str) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_fixture_metadata_is_valid() -> None:
    result = validate_metadata(FIXTURE)

    assert result.ok
    assert result.errors == []
    assert result.warnings == []


def test_missing_file(tmp_path: Path) -> None:
    result = validate_metadata(tmp_path / "metadata.jsonl")

    assert not result.ok
    assert result.errors[0].message == "Metadata file does not exist."


def test_directory_is_rejected(tmp_path: Path) -> None:
    result = validate_metadata(tmp_path)

    assert result.errors[0].message == "Metadata path is not a file."


def test_invalid_json_reports_line(tmp_path: Path) -> None:
    path = _write_lines(
        tmp_path / "metadata.jsonl",
        '{"schema_version": 1, "container": "Foo"}',
        "{not json",
    )

    result = validate_metadata(path)

    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.line == 2
    assert error.message.startswith("Invalid JSON")
    assert error.location() == f"{path}:2"


def test_schema_failure(tmp_path: Path) -> None:
    path = _write_lines(
        tmp_path / "metadata.jsonl",
        '{"schema_version": 1, "container": "Foo", "source": "bytecode"}',
        '{"schema_version": 1, "container": ""}',
        '{"schema_version": 1, "container": "Bar", '
        '"entries": [{"kind": "function", "name": "f", "arity": -1}]}',
    )

    result = validate_metadata(path)

    assert [error.line for error in result.errors] == [1, 2, 3]
    assert all(
        error.message.startswith("Schema validation failed")
        for error in result.errors
    )


def test_duplicate_container(tmp_path: Path) -> None:
    path = _write_lines(
        tmp_path / "metadata.jsonl",
        '{"schema_version": 1, "container": "Foo"}',
        "",
        '{"schema_version": 1, "container": "Foo", "source": "exports"}',
    )

    result = validate_metadata(path)

    assert [error.to_dict() for error in result.errors] == [
        {
            "path": str(path),
            "line": 3,
            "message": "Duplicate container 'Foo' (first defined on line 1).",
        }
    ]


def test_missing_schema_version_warns_once(tmp_path: Path) -> None:
    path = _write_lines(
        tmp_path / "metadata.jsonl",
        '{"container": "Foo"}',
        '{"container": "Bar"}',
    )

    result = validate_metadata(path)

    assert result.ok
    assert len(result.warnings) == 1
    assert result.warnings[0].line == 1
    assert "Missing schema_version" in result.warnings[0].message


def test_missing_schema_version_strict(tmp_path: Path) -> None:
    path = _write_lines(tmp_path / "metadata.jsonl", '{"container": "Foo"}')

    result = validate_metadata(path, strict_schema_version=True)

    assert not result.ok
    assert "Missing schema_version" in result.errors[0].message


def test_schema_version_mismatch(tmp_path: Path) -> None:
    path = tmp_path / "metadata.jsonl"
    shutil.copy(FIXTURE, path)
    with path.open("a", encoding="utf-8") as handle:
        handle.write('{"schema_version": 2, "container": "Future"}\n')
        handle.write('{"schema_version": 3, "container": "Later"}\n')

    result = validate_metadata(path)

    assert len(result.errors) == 1
    assert result.errors[0].line == 10
    assert result.errors[0].message == (
        "Schema version mismatch: expected 1, got 2."
    )
