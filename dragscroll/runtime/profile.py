from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from dragscroll.core.config import DEFAULT_CONFIG, PRESETS, DragScrollConfig, PresetName


def _profile_path() -> Path:
    return Path.home() / ".config" / "dragscroll" / "profile.json"


def save_profile(config: DragScrollConfig, path: Optional[Path] = None) -> Path:
    p = path or _profile_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    data = asdict(config)
    data["style"] = config.style.value
    p.write_text(json.dumps(data, indent=2))
    return p


def load_profile(path: Optional[Path] = None) -> Optional[dict]:
    p = path or _profile_path()
    if not p.exists():
        return None
    data = json.loads(p.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{p}: profile must be a JSON object")
    return data


def config_from_profile(profile: Optional[dict]) -> DragScrollConfig:
    """
    Build a config from a profile dict: an optional "preset" name picks
    the base, every other key overrides a field of it.
    """
    if not profile:
        return DEFAULT_CONFIG
    overrides = dict(profile)
    base = PRESETS[PresetName(overrides.pop("preset", PresetName.DEFAULT.value))]
    return base.with_overrides(overrides)
