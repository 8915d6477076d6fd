from __future__ import annotations

import pytest

from utils import camelize, is_task_name, task_to_container


def test_camelize_segments() -> None:
    assert camelize("deps") == "Deps"
    assert camelize("gen_html") == "GenHtml"
    assert camelize("ecto_gen_repo") == "EctoGenRepo"


@pytest.mark.parametrize(
    ("name", "container"),
    [
        ("compile", "Mix.Tasks.Compile"),
        ("deps.get", "Mix.Tasks.Deps.Get"),
        ("phx.gen_html", "Mix.Tasks.Phx.GenHtml"),
        ("ecto.gen.repo", "Mix.Tasks.Ecto.Gen.Repo"),
        ("xref2", "Mix.Tasks.Xref2"),
    ],
)
def test_task_to_container(name: str, container: str) -> None:
    assert is_task_name(name)
    assert task_to_container(name) == container


@pytest.mark.parametrize(
    "name",
    [
        "",
        "Deps.get",
        "deps.",
        ".get",
        "deps..get",
        "deps get",
        "2deps",
        "deps-get",
        "deps.get\n",
    ],
)
def test_invalid_task_names_are_rejected(name: str) -> None:
    assert not is_task_name(name)
    with pytest.raises(ValueError, match="Invalid task name"):
        task_to_container(name)
