from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from schemaform.core.exceptions import SchemaError
from schemaform.core.form import DefaultResolver, Identity, LocalFileSystem, PropertyDefinition
from helpers.config import load_test_config
from helpers.fakes import RecordingProbe


def _resolve(resolver: DefaultResolver, key: str, raw: dict, params: dict | None = None):
    prop = PropertyDefinition.from_raw(key, raw)
    return asyncio.run(resolver.resolve(prop, params or {}))


@pytest.fixture
def resolver(form_config, probe, tmp_path) -> DefaultResolver:
    return DefaultResolver(form_config, probe, LocalFileSystem(cwd=tmp_path))


def test_plain_string_keeps_literal_default_and_accepts_anything(resolver, probe):
    resolution = _resolve(resolver, "title", {"type": "string", "default": "hello"})
    assert resolution.default == "hello"
    assert resolution.validate("") is True
    assert probe.calls == 0


def test_identity_default_is_used_when_schema_declares_none(resolver, probe):
    resolution = _resolve(resolver, "author", {"type": "string", "name": "author"})
    assert resolution.default == "jane"
    assert _resolve(resolver, "email", {"type": "string"}).default == "jane@example.com"
    assert probe.calls == 2


def test_identity_never_overrides_declared_default(resolver, probe):
    resolution = _resolve(resolver, "author", {"type": "string", "default": "team"})
    assert resolution.default == "team"
    assert probe.calls == 0


def test_missing_identity_leaves_default_absent(form_config, tmp_path):
    resolver = DefaultResolver(form_config, RecordingProbe(Identity()), LocalFileSystem(cwd=tmp_path))
    assert _resolve(resolver, "author", {"type": "string"}).default is None


def test_path_default_is_resolved_against_working_directory(resolver, tmp_path):
    resolution = _resolve(resolver, "dirPath", {"type": "string"})
    assert resolution.default == str(tmp_path)

    resolution = _resolve(resolver, "dirPath", {"type": "string", "default": "src"})
    assert resolution.default == str(tmp_path / "src")


def test_path_validator_requires_existing_path(resolver, tmp_path):
    (tmp_path / "present").mkdir()
    validate = _resolve(resolver, "dirPath", {"type": "string"}).validate

    assert validate("present") is True
    assert validate(str(tmp_path / "present")) is True
    assert validate("missing") == "invalid input"


def test_path_validator_uses_custom_message(resolver):
    validate = _resolve(resolver, "dirPath", {"type": "string", "invalidate": "no such directory"}).validate
    assert validate("missing") == "no such directory"


def test_pattern_validator_accepts_and_rejects(resolver):
    validate = _resolve(resolver, "slug", {"type": "string", "regExp": "^[a-z]+$"}).validate
    assert validate("abc") is True
    assert validate("abc1") == "invalid input"


def test_pattern_validator_prefers_custom_message(resolver):
    validate = _resolve(
        resolver, "slug", {"type": "string", "regExp": "^[a-z]+$", "invalidate": "lowercase only"}
    ).validate
    assert validate("abc1") == "lowercase only"


def test_pattern_replaces_path_validation(resolver, tmp_path):
    validate = _resolve(resolver, "dirPath", {"type": "string", "regExp": "^tmp-"}).validate
    # Matches the pattern even though the path does not exist.
    assert validate("tmp-nowhere") is True
    assert not (tmp_path / "tmp-nowhere").exists()
    assert validate("present") == "invalid input"


def test_number_baseline_validator(resolver):
    validate = _resolve(resolver, "port", {"type": "number"}).validate
    assert validate("8080") is True
    assert validate(3.5) is True
    assert validate("eighty") == "please enter a number"


def test_invalid_pattern_is_a_schema_error(resolver):
    with pytest.raises(SchemaError):
        _resolve(resolver, "slug", {"type": "string", "regExp": "[unclosed"})


def test_localized_invalid_message(tmp_path, probe):
    config = load_test_config(tmp_path, {"SCHEMAFORM_form__locale": "zh"})
    resolver = DefaultResolver(config, probe, LocalFileSystem(cwd=tmp_path))
    validate = _resolve(resolver, "slug", {"type": "string", "regExp": "^a$"}).validate
    assert validate("b") == "输入不符合规范"


def test_configured_path_keys(tmp_path, probe):
    config = load_test_config(tmp_path, {"SCHEMAFORM_form__path_keys": '["outDir"]'})
    resolver = DefaultResolver(config, probe, LocalFileSystem(cwd=tmp_path))
    assert _resolve(resolver, "outDir", {"type": "string", "default": "build"}).default == str(
        Path(tmp_path) / "build"
    )
    assert _resolve(resolver, "dirPath", {"type": "string", "default": "x"}).default == "x"
