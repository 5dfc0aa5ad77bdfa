from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError

BUNDLED_MANIFEST = Path(__file__).resolve().parent / "data" / "components.yaml"

PHASES = ("configure", "post")


@dataclass(frozen=True)
class LinkSpec:
    source: str
    target: str
    mode: Optional[int] = None


@dataclass(frozen=True)
class BackupCopySpec:
    path: str
    name: str


@dataclass(frozen=True)
class Component:
    name: str
    title: str
    phase: str = "configure"
    requires: Optional[str] = None
    command: Optional[str] = None
    formula: Optional[str] = None
    ensure_dirs: List[str] = field(default_factory=list)
    backup_copies: List[BackupCopySpec] = field(default_factory=list)
    links: List[LinkSpec] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ConfigDirsSpec:
    source: str = ".config"
    target: str = ".config"
    exclude: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Manifest:
    components: List[Component]
    config_dirs: ConfigDirsSpec

    def by_phase(self, phase: str) -> List[Component]:
        return [c for c in self.components if c.phase == phase]


def _parse_mode(value: Any, where: str) -> Optional[int]:
    if value is None:
        return None
    try:
        # "600" as a string, or 0600 which YAML already reads as octal.
        return int(str(value), 8) if not isinstance(value, int) else value
    except ValueError as e:
        raise ConfigError(f"{where}: mode must be octal, got {value!r}") from e


def _str_list(obj: Dict[str, Any], key: str, where: str) -> List[str]:
    items = obj.get(key) or []
    if not isinstance(items, list):
        raise ConfigError(f"{where}: {key} must be a list")
    return [str(i) for i in items]


def _parse_component(obj: Any, idx: int) -> Component:
    if not isinstance(obj, dict) or not obj.get("name"):
        raise ConfigError(f"components[{idx}] must be a mapping with a name")
    name = str(obj["name"])
    where = f"component {name}"

    phase = str(obj.get("phase") or "configure")
    if phase not in PHASES:
        raise ConfigError(f"{where}: unknown phase {phase!r}")

    links: List[LinkSpec] = []
    for raw in obj.get("links") or []:
        if not isinstance(raw, dict) or "source" not in raw or "target" not in raw:
            raise ConfigError(f"{where}: each link needs source and target")
        links.append(
            LinkSpec(
                source=str(raw["source"]),
                target=str(raw["target"]),
                mode=_parse_mode(raw.get("mode"), where),
            )
        )

    copies: List[BackupCopySpec] = []
    for raw in obj.get("backup_copies") or []:
        if not isinstance(raw, dict) or "path" not in raw or "name" not in raw:
            raise ConfigError(f"{where}: each backup copy needs path and name")
        copies.append(BackupCopySpec(path=str(raw["path"]), name=str(raw["name"])))

    if bool(obj.get("formula")) != bool(obj.get("command")):
        raise ConfigError(f"{where}: formula and command go together")

    return Component(
        name=name,
        title=str(obj.get("title") or name),
        phase=phase,
        requires=str(obj["requires"]) if obj.get("requires") else None,
        command=str(obj["command"]) if obj.get("command") else None,
        formula=str(obj["formula"]) if obj.get("formula") else None,
        ensure_dirs=_str_list(obj, "ensure_dirs", where),
        backup_copies=copies,
        links=links,
        notes=_str_list(obj, "notes", where),
    )


def parse_manifest(data: Dict[str, Any]) -> Manifest:
    raw_components = data.get("components") or []
    if not isinstance(raw_components, list):
        raise ConfigError("components must be a list")
    components = [_parse_component(c, i) for i, c in enumerate(raw_components)]

    names = [c.name for c in components]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise ConfigError(f"Duplicate component names: {', '.join(dupes)}")

    cd = data.get("config_dirs") or {}
    if not isinstance(cd, dict):
        raise ConfigError("config_dirs must be a mapping")
    config_dirs = ConfigDirsSpec(
        source=str(cd.get("source") or ".config"),
        target=str(cd.get("target") or ".config"),
        exclude=_str_list(cd, "exclude", "config_dirs"),
    )
    return Manifest(components=components, config_dirs=config_dirs)


def load_manifest(path: Optional[Path] = None) -> Manifest:
    p = path or BUNDLED_MANIFEST
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in manifest {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Manifest must be a mapping/dict: {p}")
    return parse_manifest(data)
