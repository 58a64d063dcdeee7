# engine/config.py
from dataclasses import dataclass, field
from typing import Optional
import os
import tomllib  # python >=3.11

@dataclass
class SearchConfig:
    seed: Optional[int] = None  # None means tie-breaks draw from the process-wide generator

@dataclass
class GameConfig:
    human_mark: str = "X"
    first_mark: str = "X"  # the side that opens every game

@dataclass
class UIConfig:
    engine_name: str = "TicTacToeEngine"
    engine_author: str = "TicTacToe Engine Authors"
    api_port: int = 8000

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "game", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("ENGINE_CONFIG_TOML", "config.toml"))
# env overrides for quick debugging
override_seed = os.environ.get("ENGINE_SEED")
if override_seed:
    try:
        CONFIG.search.seed = int(override_seed)
    except ValueError:
        raise ValueError(f"ENGINE_SEED must be an integer, got {override_seed!r}") from None
override_level = os.environ.get("ENGINE_LOG_LEVEL")
if override_level:
    CONFIG.log_level = override_level
