"""Persistent CLI defaults and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from identiconic_renderer import IdenticonConfig, parse_hex_color
from identiconic_renderer.errors import ConfigurationError, InvalidInputError
from identiconic_renderer.models import DEFAULT_ALGORITHM, DEFAULT_CELL_SIZE, DEFAULT_SIZE


CONFIG_VERSION = 2


@dataclass
class RenderSettings:
    size: int = DEFAULT_SIZE
    cell_size: int = DEFAULT_CELL_SIZE
    color: str | None = None
    algorithm: str = DEFAULT_ALGORITHM


@dataclass
class OutputSettings:
    directory: str = "."


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderSettings = field(default_factory=RenderSettings)
    output: OutputSettings = field(default_factory=OutputSettings)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Identiconic"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Identiconic"
    return Path.home() / ".config" / "identiconic"


def config_path() -> Path:
    return config_root() / "config.json"


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    algorithm = cfg.render.algorithm if isinstance(cfg.render.algorithm, str) else ""
    cfg.render.algorithm = algorithm.strip().lower() or DEFAULT_ALGORITHM
    color = cfg.render.color.strip() if isinstance(cfg.render.color, str) else ""
    if not color:
        cfg.render.color = None
    else:
        cfg.render.color = "#" + color.lstrip("#").upper()


def _normalize_output(cfg: AppConfig) -> None:
    if not isinstance(cfg.output.directory, str) or not cfg.output.directory.strip():
        cfg.output.directory = OutputSettings().directory


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 stored render options as flat top-level keys.
        render = dict(_section(data, "render"))
        for key in ("size", "cell_size", "color", "algorithm"):
            if key in data:
                render.setdefault(key, data.pop(key))
        data["render"] = render
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    try:
        data = _migrate(raw)
        version = int(data.get("config_version", CONFIG_VERSION))
    except (TypeError, ValueError):
        return AppConfig()

    cfg = AppConfig(
        config_version=version,
        render=_merge(RenderSettings, _section(data, "render")),
        output=_merge(OutputSettings, _section(data, "output")),
    )

    _normalize_render(cfg)
    _normalize_output(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def to_identicon_config(settings: RenderSettings) -> IdenticonConfig:
    color = None
    if settings.color:
        try:
            color = parse_hex_color(settings.color)
        except InvalidInputError as exc:
            raise ConfigurationError(str(exc)) from exc
    return IdenticonConfig(
        size=settings.size,
        cell_size=settings.cell_size,
        color=color,
        algorithm=settings.algorithm,
    )
