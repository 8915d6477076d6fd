from __future__ import annotations

from pathlib import Path

import pytest

from resolve.ecosystem import (
    DEFAULT_STDLIB_CONTAINERS,
    HOSTED_DOCS_URL,
    Provenance,
)
from rules.config import (
    CONFIG_FILENAME,
    ConfigError,
    DocLinksConfig,
    load_config,
    resolve_metadata_path,
)


def _write_config(repo_root: Path, toml_content: str) -> None:
    (repo_root / CONFIG_FILENAME).write_text(toml_content, encoding="utf-8")


def test_missing_config_gives_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == DocLinksConfig()
    assert config.package is None
    assert config.ext == ".html"
    assert config.metadata == "metadata.jsonl"
    assert config.ecosystem.hosted_docs_url == HOSTED_DOCS_URL
    assert set(config.ecosystem.stdlib_containers) == DEFAULT_STDLIB_CONTAINERS


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
package = "my_app"
ext = ".xhtml"
skip_undefined_reference_warnings_on = ["MyApp.Legacy"]

[ecosystem]
stdlib_containers = ["lists", "maps"]

[ecosystem.packages]
"Plug.Conn" = "plug"
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.package == "my_app"
    assert config.ext == ".xhtml"
    assert config.skip_undefined_reference_warnings_on == ["MyApp.Legacy"]
    assert config.ecosystem.stdlib_containers == ["lists", "maps"]
    assert config.ecosystem.packages == {"Plug.Conn": "plug"}


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unknown_ecosystem_key_rejected(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
[ecosystem]
erlang_docs = "http://example.com/"
""".strip(),
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "package = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "toml_content",
    [
        'ext = "html"',
        '[ecosystem]\nhosted_docs_url = "https://hexdocs.pm"',
        '[ecosystem]\nstdlib_docs_url = "http://www.erlang.org/doc/man"',
        '[ecosystem]\nstdlib_containers = ["Lists"]',
    ],
)
def test_invalid_values_rejected(tmp_path: Path, toml_content: str) -> None:
    _write_config(tmp_path, toml_content)

    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(tmp_path)


def test_build_ecosystem_prefers_configured_packages() -> None:
    config = DocLinksConfig.model_validate(
        {"ecosystem": {"packages": {"String": "my_string"}}}
    )

    ecosystem = config.build_ecosystem({"String": "elixir", "Plug.Conn": "plug"})

    assert ecosystem.package_of("String") == "my_string"
    assert ecosystem.package_of("Plug.Conn") == "plug"
    assert ecosystem.classify("lists") is Provenance.STDLIB


def test_resolve_metadata_path_within_root(tmp_path: Path) -> None:
    resolved = resolve_metadata_path(tmp_path, "build/metadata.jsonl")

    assert resolved == (tmp_path / "build" / "metadata.jsonl").resolve()


@pytest.mark.parametrize(
    "metadata",
    ["", "~/metadata.jsonl", "/abs/metadata.jsonl", "../outside/metadata.jsonl"],
)
def test_resolve_metadata_path_rejects_escapes(tmp_path: Path, metadata: str) -> None:
    with pytest.raises(ConfigError):
        resolve_metadata_path(tmp_path, metadata)


def test_resolve_metadata_path_reports_escape(tmp_path: Path) -> None:
    (tmp_path / "project").mkdir()

    with pytest.raises(ConfigError, match="escapes the project root"):
        resolve_metadata_path(tmp_path / "project", "../metadata.jsonl")
