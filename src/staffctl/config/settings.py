"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``STAFFCTL_*`` prefix
  3. TOML file: ``staffctl.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource`. The
TOML file is, in order: ``--config``, ``$STAFFCTL_CONFIG``, or the first
``staffctl.toml`` found walking up from the start directory.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from staffctl.config.models import DisplayConfig, RatesConfig, StoreConfig

CONFIG_FILENAME = "staffctl.toml"
CONFIG_ENV_VAR = "STAFFCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``staffctl.toml`` at or above *start* (default: cwd)."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file in effect.

    A path named by ``--config`` or ``$STAFFCTL_CONFIG`` must exist; pointing
    at a missing file is an error rather than a silent fall back to defaults.

    Raises:
        click.ClickException: If an explicitly named file does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if not named:
        return find_config(start)
    path = Path(named)
    if not path.is_file():
        source = "--config" if explicit else CONFIG_ENV_VAR
        msg = f"Config file not found: {path} (from {source})"
        raise click.ClickException(msg)
    return path


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``staffctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class StaffSettings(BaseSettings):
    """Unified settings for the staffctl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        root: Directory relative store paths resolve against (parent of
            ``staffctl.toml``, or CWD if no config found).
        config_path: The TOML file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STAFFCTL_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    store: StoreConfig = Field(default_factory=StoreConfig)
    rates: RatesConfig = Field(default_factory=RatesConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @property
    def data_file(self) -> Path:
        """Absolute path of the record store file."""
        path = self.store.path
        return path if path.is_absolute() else self.root / path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        data_file: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> StaffSettings:
        """Construct settings from CLI invocation.

        Locates the config file with :func:`locate_config`,
        resolves *root* from the config file's parent directory, and merges
        CLI flags as highest-priority overrides. An explicit *data_file*
        replaces the ``[store]`` path and is taken relative to CWD.
        """
        toml_path = locate_config(config_path, root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        if data_file:
            cli_flags["store"] = StoreConfig(path=Path(data_file).resolve())

        _tls.toml_path = toml_path
        try:
            return cls(
                root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
