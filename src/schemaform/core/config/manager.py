"""
schemaform configuration management (YAML-only).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from schemaform.core.exceptions import ConfigError
from schemaform.core.schemas import SchemaValidationError, validate_payload
from schemaform.core.utils.io import iter_yaml_files, read_yaml
from schemaform.core.utils.merge import deep_merge
from schemaform.data import get_data_path

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILENAME = ".schemaform.yml"
ENV_PREFIX = "SCHEMAFORM_"


class ConfigManager:
    """Load, merge, and validate schemaform configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: SCHEMAFORM_<section>__<key>
    2. Explicit config file (``config_path``) or ``<cwd>/.schemaform.yml``
    3. Bundled defaults: schemaform.data/config/*.yaml (alphabetical order)
    """

    def __init__(
        self,
        cwd: Optional[Path] = None,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.core_config_dir = get_data_path("config")
        self.config_path = Path(config_path) if config_path is not None else None
        self.environ = environ if environ is not None else os.environ

    @property
    def project_config_path(self) -> Optional[Path]:
        """Return the project-level config file, if any applies."""
        if self.config_path is not None:
            return self.config_path
        candidate = self.cwd / PROJECT_CONFIG_FILENAME
        return candidate if candidate.exists() else None

    # ---------- Env overrides ----------
    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(self.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segs = raw.split("__")
            if not raw or any(seg == "" for seg in segs):
                raise ConfigError(
                    f"Malformed {ENV_PREFIX}* key: '{key}'",
                    context={"key": key},
                )
            yield segs, self._coerce_type(self.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            existing = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            use_key = existing.get(part.lower(), part)
            nxt = cur.get(use_key)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[use_key] = nxt
            cur = nxt
        existing = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
        cur[existing.get(path[-1].lower(), path[-1])] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value in self._iter_env_overrides():
            logger.debug("config override from environment: %s", "__".join(path))
            self._set_nested(cfg, path, typed_value)

    # ---------- Loading ----------
    def _load_file(self, path: Path) -> Dict[str, Any]:
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except Exception as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping", context={"path": str(path)})
        return data

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load the merged configuration.

        Raises:
            ConfigError: When a source cannot be read or validation fails.
        """
        cfg: Dict[str, Any] = {}
        for path in iter_yaml_files(self.core_config_dir):
            cfg = deep_merge(cfg, self._load_file(path))

        project_path = self.project_config_path
        if project_path is not None:
            if not project_path.exists():
                raise ConfigError(f"Config file not found: {project_path}", context={"path": str(project_path)})
            logger.debug("loading project config %s", project_path)
            cfg = deep_merge(cfg, self._load_file(project_path))

        self.apply_env_overrides(cfg)

        if validate:
            try:
                validate_payload(cfg, "config.schema.yaml")
            except SchemaValidationError as exc:
                raise ConfigError(str(exc)) from exc
        return cfg

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key (e.g. ``form.locale``)."""
        cur: Any = self.load_config(validate=False)
        for part in key.split("."):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur


__all__ = ["ConfigManager", "PROJECT_CONFIG_FILENAME", "ENV_PREFIX"]
