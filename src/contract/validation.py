"""Validation helpers for the metadata artifact."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import orjson
from pydantic import ValidationError

from contract.artifacts import METADATA_SCHEMA_VERSION
from contract.models import ContainerRecord

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class ValidationMessage:
    path: Path
    message: str
    line: int | None = None

    def location(self) -> str:
        if self.line is None:
            return str(self.path)
        return f"{self.path}:{self.line}"

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "line": self.line,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_metadata(
    path: Path, *, strict_schema_version: bool = False
) -> ValidationResult:
    """Validate a metadata.jsonl artifact line by line.

    Reports unreadable files, invalid JSON, schema failures, containers that
    appear more than once and schema version problems. A missing
    ``schema_version`` is a warning unless ``strict_schema_version`` is set.
    """
    result = ValidationResult()

    if not path.exists():
        result.errors.append(
            ValidationMessage(path=path, message="Metadata file does not exist.")
        )
        return result

    if not path.is_file():
        result.errors.append(
            ValidationMessage(path=path, message="Metadata path is not a file.")
        )
        return result

    try:
        handle = path.open("rb")
    except OSError as exc:
        result.errors.append(
            ValidationMessage(path=path, message=f"Failed to read file: {exc}.")
        )
        return result

    seen: dict[str, int] = {}
    # keyed by whether schema_version was present; each problem is reported once
    schema_reported: set[bool] = set()
    with handle:
        for line_number, raw_line in enumerate(handle, 1):
            line = raw_line.strip()
            if not line:
                continue
            try:
                data = orjson.loads(line)
            except orjson.JSONDecodeError as exc:
                result.errors.append(
                    ValidationMessage(
                        path=path,
                        line=line_number,
                        message=f"Invalid JSON: {exc}.",
                    )
                )
                continue

            schema_present = isinstance(data, dict) and "schema_version" in data
            try:
                record = ContainerRecord.model_validate(data)
            except ValidationError as exc:
                result.errors.append(
                    ValidationMessage(
                        path=path,
                        line=line_number,
                        message=f"Schema validation failed: {exc}.",
                    )
                )
                continue

            first_line = seen.setdefault(record.container, line_number)
            if first_line != line_number:
                result.errors.append(
                    ValidationMessage(
                        path=path,
                        line=line_number,
                        message=(
                            f"Duplicate container '{record.container}' "
                            f"(first defined on line {first_line})."
                        ),
                    )
                )

            if schema_present and record.schema_version == METADATA_SCHEMA_VERSION:
                continue
            if schema_present in schema_reported:
                continue
            schema_reported.add(schema_present)

            message = _schema_version_message(schema_present, record.schema_version)
            target = (
                result.errors
                if schema_present or strict_schema_version
                else result.warnings
            )
            target.append(ValidationMessage(path=path, line=line_number, message=message))

    return result


def _schema_version_message(schema_present: bool, schema_version: int) -> str:
    if schema_present:
        return (
            "Schema version mismatch: "
            f"expected {METADATA_SCHEMA_VERSION}, got {schema_version}."
        )
    return f"Missing schema_version; defaulted to {METADATA_SCHEMA_VERSION}."


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_metadata",
]
