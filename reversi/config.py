from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from reversi.core import PieceColor


@dataclass
class EnvConfig:
    starting_color: str = "black"
    enforce_legal_actions: bool = True
    render_mode: Optional[str] = None
    illegal_move_penalty: float = -1.0

    def __post_init__(self) -> None:
        self.starting_color = PieceColor.parse(self.starting_color).value


def load_yaml_config(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_env_config(path: Optional[Union[str, Path]] = None, **overrides: Any) -> EnvConfig:
    """Build an :class:`EnvConfig` from the ``env`` section of a YAML file.

    Keyword overrides that are not ``None`` win over the file values.
    """
    cfg: Dict[str, Any] = {}
    if path is not None:
        cfg = dict(load_yaml_config(path).get("env", {}) or {})
    for key, value in overrides.items():
        if value is not None:
            cfg[key] = value
    return EnvConfig(**cfg)
