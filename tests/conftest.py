import copy
import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'schemaform' and tests/ importable as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from schemaform.core.config import FormConfig
from schemaform.core.form import FormQuestionnaire, Identity, LocalFileSystem
from schemaform.core.stdlib_logging import reset_stdlib_logging_for_tests
from schemaform.core.schemas import clear_schema_cache
from helpers.config import load_test_config
from helpers.fakes import RecordingProbe, ScriptedPrompter


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Ensure caches and logging handlers are fresh for each test."""
    clear_schema_cache()
    yield
    clear_schema_cache()
    reset_stdlib_logging_for_tests()


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch) -> Path:
    """Run the test from an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    for key in [k for k in os.environ if k.startswith("SCHEMAFORM_")]:
        monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture
def form_config(tmp_path) -> FormConfig:
    """Bundled default configuration, unaffected by the developer environment."""
    return load_test_config(tmp_path)


@pytest.fixture
def probe() -> RecordingProbe:
    return RecordingProbe(Identity(author="jane", email="jane@example.com"))


@pytest.fixture
def make_questionnaire(form_config, probe, tmp_path):
    """Factory building a FormQuestionnaire around a scripted prompter."""

    def _make(answers: Dict[str, Any] | None = None, *, config: FormConfig | None = None, **kwargs: Any):
        prompter = ScriptedPrompter(answers or {})
        questionnaire = FormQuestionnaire(
            config or form_config,
            prompter=prompter,
            probe=kwargs.pop("probe", probe),
            filesystem=kwargs.pop("filesystem", LocalFileSystem(cwd=tmp_path)),
        )
        return questionnaire, prompter

    return _make


REGION_SCHEMA: Dict[str, Any] = {
    "properties": {
        "name": {"type": "string", "name": "project name", "default": "demo"},
        "region": {
            "type": "list",
            "name": "region",
            "list": [
                {
                    "value": "europe",
                    "name": "Europe",
                    "subList": {"cityRef": [{"value": "paris", "name": "Paris"}]},
                },
                {
                    "value": "asia",
                    "name": "Asia",
                    "desc": "Asia-Pacific",
                    "subList": {
                        "cityRef": [
                            {"value": "tokyo", "name": "Tokyo"},
                            {"value": "seoul", "name": "Seoul"},
                        ]
                    },
                },
            ],
        },
        "city": {
            "type": "list",
            "name": "city",
            "dependence": "region",
            "depLevel": 1,
            "ref": "cityRef",
        },
        "private": {"type": "boolean", "name": "private repository", "default": True},
        "secret": {"type": "password", "name": "token", "disable": True},
    }
}


@pytest.fixture
def region_schema() -> Dict[str, Any]:
    return copy.deepcopy(REGION_SCHEMA)
