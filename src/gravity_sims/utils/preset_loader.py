from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

PRESET_PACKAGE = "gravity_sims.presets"


@dataclass(frozen=True)
class LoadedPreset:
    preset_path: Path
    resolved: Dict[str, Any]
    loaded_files: Tuple[Path, ...]  # includes, then the preset itself

    @property
    def physics(self) -> Dict[str, Any]:
        return dict(self.resolved.get("physics") or {})


def _deep_merge(base: Any, override: Any) -> Any:
    """
    dict + dict merges recursively; anything else (lists included) is replaced.
    """
    if isinstance(base, dict) and isinstance(override, dict):
        out = dict(base)
        for k, v in override.items():
            out[k] = _deep_merge(out[k], v) if k in out else v
        return out
    if isinstance(override, list):
        return list(override)
    return override


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping: {path}")
    return data


def resolve_preset_path(preset: str | Path) -> Path:
    """
    Accept a path to a YAML file, or the bare name of a bundled preset
    (e.g. "solar_system").
    """
    path = Path(preset).expanduser()
    if path.suffix in (".yaml", ".yml") and path.exists():
        return path.resolve()
    bundled = resources.files(PRESET_PACKAGE) / f"{Path(preset).stem}.yaml"
    if bundled.is_file():
        return Path(str(bundled)).resolve()
    raise FileNotFoundError(f"No preset file or bundled preset named {preset!r}")


def _load_with_includes(path: Path, loaded: List[Path], stack: Tuple[Path, ...]) -> Dict[str, Any]:
    if path in stack:
        chain = " -> ".join(str(p) for p in stack + (path,))
        raise ValueError(f"Circular preset include: {chain}")
    data = _load_yaml(path)

    include_list = data.pop("include", None) or []
    if not isinstance(include_list, list):
        raise ValueError(f"'include' must be a list in {path}")

    merged: Dict[str, Any] = {}
    for rel in include_list:
        if not isinstance(rel, str):
            raise ValueError(f"include entries must be strings. Got {type(rel)} in {path}")
        inc_path = (path.parent / rel).expanduser().resolve()
        merged = _deep_merge(merged, _load_with_includes(inc_path, loaded, stack + (path,)))

    loaded.append(path)
    return _deep_merge(merged, data)


def load_preset(preset: str | Path) -> LoadedPreset:
    """
    Load a preset YAML, resolving nested `include:` lists before applying
    the file's own keys.

      include:
        - default_physics.yaml
      physics:
        dt: 0.0166
      bodies:
        - name: Sun
          ...
    """
    preset_path = resolve_preset_path(preset)
    loaded: List[Path] = []
    resolved = _load_with_includes(preset_path, loaded, ())
    return LoadedPreset(
        preset_path=preset_path,
        resolved=resolved,
        loaded_files=tuple(loaded),
    )
