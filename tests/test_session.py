from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

from contract.models import ContainerRecord
from refs.metadata import MetadataIndex, RichDocs
from rules.config import DocLinksConfig
from session import open_session

FIXTURE = Path(__file__).parent / "fixtures" / "metadata.jsonl"


def test_session_reads_configured_metadata(tmp_path: Path) -> None:
    (tmp_path / "build").mkdir()
    shutil.copy(FIXTURE, tmp_path / "build" / "docs.jsonl")
    (tmp_path / "doclinks.toml").write_text(
        'package = "my_app"\nmetadata = "build/docs.jsonl"\n', encoding="utf-8"
    )

    session = open_session(root=tmp_path)
    context = session.context("MyApp.Accounts", id="MyApp.Accounts.get_user/1")

    assert len(session.index) == 9
    assert context.package == "my_app"
    assert context.module_id == "MyApp.Accounts"
    assert (
        session.resolver.resolve_text("String.upcase/2", context)
        == "https://hexdocs.pm/elixir/String.html#upcase/2"
    )


def test_session_without_metadata_is_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="session"):
        session = open_session(root=tmp_path)

    assert len(session.index) == 0
    assert "no metadata artifact" in caplog.text


def test_configured_packages_override_metadata_packages(tmp_path: Path) -> None:
    config = DocLinksConfig.model_validate(
        {"package": "my_app", "ecosystem": {"packages": {"Vendored": "my_app"}}}
    )
    index = MetadataIndex.from_records(
        [ContainerRecord(container="Vendored", package="vendor_lib")]
    )

    session = open_session(root=tmp_path, config=config, index=index)

    assert index.package_of("Vendored") == "vendor_lib"
    assert isinstance(index.load("Vendored"), RichDocs)
    assert (
        session.resolver.resolve_text("Vendored", session.context("MyApp"))
        == "Vendored.html"
    )


def test_context_applies_config(tmp_path: Path) -> None:
    config = DocLinksConfig(
        package="my_app",
        ext=".xhtml",
        skip_undefined_reference_warnings_on=["MyApp.Legacy"],
    )
    session = open_session(root=tmp_path, config=config, index=MetadataIndex())

    context = session.context("MyApp.Legacy", id="MyApp.Legacy.run/0")

    assert context.ext == ".xhtml"
    assert context.warnings_suppressed()
    assert session.context(module_id="Other").module_id == "Other"
