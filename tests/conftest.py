"""Shared test fixtures for df-sol tests."""
import textwrap
from pathlib import Path

import pytest

from df_sol.core import config as config_module
from df_sol.core.config import DfSolConfig
from df_sol.core.context import GenerationContext, build_context
from df_sol.core.naming import ProjectName
from df_sol.scaffold.catalog import AssetCatalog, get_catalog


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep DF_SOL_* variables from the host out of every test."""
    for var in ("DF_SOL_ANCHOR_VERSION", "DF_SOL_LICENSE", "DF_SOL_PROGRAM_ID", "DF_SOL_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def catalog() -> AssetCatalog:
    """The bundled catalog."""
    return get_catalog()


@pytest.fixture
def counter_context() -> GenerationContext:
    """Full context for a project named 'counter' with mocha tests."""
    return build_context(
        ProjectName.parse("counter"),
        test_script="yarn run ts-mocha -p ./tsconfig.json -t 1000000 tests/**/*.ts",
        config=DfSolConfig(),
    )


@pytest.fixture
def small_context() -> GenerationContext:
    """Minimal context for hand-built plans."""
    return GenerationContext(PROJECT_NAME="demo", SNAKE_NAME="demo")


@pytest.fixture
def write_catalog(tmp_path):
    """Write a catalog.yml plus source files into a temp templates dir."""

    def _write(manifest: str, files=None) -> Path:
        templates_dir = tmp_path / "templates"
        templates_dir.mkdir(exist_ok=True)
        (templates_dir / "catalog.yml").write_text(textwrap.dedent(manifest))
        for relative, content in (files or {}).items():
            target = templates_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content)
        return templates_dir

    return _write


MINIMAL_MANIFEST = """\
    version: 1
    programs:
      basic: {description: basic}
      counter: {description: counter}
      mint-token: {description: mint}
    layouts:
      single: {description: single}
      multiple: {description: multiple}
    test_frameworks:
      mocha: {test_script: mocha}
      jest: {test_script: jest}
      rust: {test_script: cargo test}
    languages:
      typescript: {description: ts}
      javascript: {description: js, suffix: "-js"}
    compose:
      - "program-{program}"
      - "runner-{test}"
    groups:
      program-basic:
        - {path: "programs/{{PROJECT_NAME}}", type: directory}
        - {path: "programs/{{PROJECT_NAME}}/lib.rs", source: lib.rs}
      runner-mocha:
        - {path: package.json, source: package.json}
    """


@pytest.fixture
def minimal_manifest() -> str:
    """Manifest where only basic (any layout) + mocha is complete."""
    return MINIMAL_MANIFEST
