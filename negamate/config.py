# negamate/config.py
from dataclasses import dataclass, field
from typing import Dict, Optional
import os
import tomllib

# Material weights (pawn units). The king weight dwarfs every other
# term so a lost king always dominates the material balance.
PIECE_VALUES = {
    "NONE": 0.0,
    "PAWN": 1.0,
    "KNIGHT": 3.05,
    "BISHOP": 3.33,
    "ROOK": 5.63,
    "QUEEN": 9.5,
    "KING": 9999.0,
}


def default_workers() -> int:
    """One worker per spare core, never fewer than one."""
    cores = os.cpu_count() or 2
    return max(1, cores - 1)


@dataclass
class SearchConfig:
    depth: int = 3
    workers: int = field(default_factory=default_workers)
    start_method: Optional[str] = None  # multiprocessing start method; None uses the platform default


@dataclass
class EvalConfig:
    piece_values: Dict[str, float] = field(default_factory=lambda: PIECE_VALUES.copy())


@dataclass
class UIConfig:
    engine_name: str = "NegaMate"
    engine_author: str = "NegaMate developers"
    api_port: int = 8000
    show_progress: bool = True


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            if section not in raw:
                continue
            target = getattr(cfg, section)
            for k, v in raw[section].items():
                if not hasattr(target, k):
                    continue
                current = getattr(target, k)
                # tables merge into the defaults entry by entry
                if isinstance(current, dict) and isinstance(v, dict):
                    current.update(v)
                else:
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("NEGAMATE_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("NEGAMATE_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        pass
