"""Derivation run use-case tests."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
import yaml
from model_schema_factory.document_assembly import OutputFormat
from model_schema_factory.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_schema_derivation_run,
)

_MODULE_NAME = "run_use_case_models"

_MODELS_SOURCE = '''
from model_schema_factory import Deferred, api_property


class Owner:
    name = api_property(type=str)
    cats = api_property(type=Deferred(lambda: Cat), is_array=True, required=False)


class Cat:
    name = api_property(type=str, description="Given name")
    owner = api_property(type=Owner)


class Broken:
    partner = api_property()


NOT_A_MODEL = 42
'''


@pytest.fixture
def models_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / f"{_MODULE_NAME}.py").write_text(_MODELS_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, _MODULE_NAME, raising=False)
    return _MODULE_NAME


def _write_config(tmp_path: Path, contents: str) -> str:
    config_path = tmp_path / "model-schemas.yaml"
    config_path.write_text(contents, encoding="utf-8")
    return str(config_path)


def test_derives_configured_models_into_components_document(
    tmp_path: Path, models_module: str
) -> None:
    config_path = _write_config(tmp_path, f"models:\n  - '{models_module}:Cat'\n")

    outcome = execute_schema_derivation_run(RunRequest(config_path=config_path))

    assert outcome.schema_names == ("Owner", "Cat")
    schemas = outcome.document["components"]["schemas"]
    assert schemas["Cat"]["properties"]["owner"] == {
        "schema": {"$ref": "#/components/schemas/Owner"}
    }
    assert schemas["Owner"]["properties"]["cats"] == {
        "type": "array",
        "items": {"$ref": "#/components/schemas/Cat"},
    }
    assert json.loads(outcome.rendered) == outcome.document
    assert outcome.output_path is None


def test_rewrites_configured_parameters(tmp_path: Path, models_module: str) -> None:
    config_path = _write_config(
        tmp_path,
        f"""
models:
  - '{models_module}:Owner'
parameters:
  - name: cats
    in: body
    type: '{models_module}:Cat'
    is_array: true
  - name: limit
    in: query
    type: integer
    required: false
output:
  format: yaml
""",
    )

    outcome = execute_schema_derivation_run(RunRequest(config_path=config_path))

    assert outcome.document["parameters"] == [
        {
            "in": "body",
            "name": "cats",
            "required": True,
            "schema": {"type": "array", "items": {"$ref": "#/components/schemas/Cat"}},
        },
        {"in": "query", "name": "limit", "required": False, "schema": {"type": "integer"}},
    ]
    assert outcome.schema_names == ("Cat", "Owner", "Owner", "Cat")
    assert yaml.safe_load(outcome.rendered) == outcome.document


def test_writes_output_file_with_requested_format(tmp_path: Path, models_module: str) -> None:
    config_path = _write_config(tmp_path, f"models: ['{models_module}:Owner']\n")
    output_path = tmp_path / "out" / "components.yaml"

    outcome = execute_schema_derivation_run(
        RunRequest(
            config_path=config_path,
            output_path=str(output_path),
            output_format=OutputFormat.YAML,
        )
    )

    assert outcome.output_path == output_path.resolve()
    assert yaml.safe_load(output_path.read_text(encoding="utf-8")) == outcome.document


@pytest.mark.parametrize(
    ("model_path", "message"),
    [
        ("Broken", 'property key: "partner"'),
        ("NOT_A_MODEL", "not a class"),
        ("Missing", "has no attribute"),
    ],
)
def test_failures_are_reported_as_run_errors(
    tmp_path: Path, models_module: str, model_path: str, message: str
) -> None:
    config_path = _write_config(tmp_path, f"models: ['{models_module}:{model_path}']\n")

    with pytest.raises(RunExecutionError, match=message):
        execute_schema_derivation_run(RunRequest(config_path=config_path))


def test_conflicting_duplicates_fail_under_error_policy(
    tmp_path: Path, models_module: str
) -> None:
    other_module = tmp_path / "run_use_case_other_models.py"
    other_module.write_text(
        "from model_schema_factory import api_property\n\n\n"
        "class Cat:\n    lives = api_property(type=int)\n",
        encoding="utf-8",
    )
    sys.modules.pop("run_use_case_other_models", None)
    config_path = _write_config(
        tmp_path,
        f"""
models:
  - '{models_module}:Cat'
  - 'run_use_case_other_models:Cat'
output:
  duplicate_policy: error
""",
    )

    with pytest.raises(RunExecutionError, match="registered more than once"):
        execute_schema_derivation_run(RunRequest(config_path=config_path))
