# src/goal_categorizer/config.py
from dataclasses import dataclass, asdict
import os
from typing import Dict, Any

from dotenv import load_dotenv

# .env is optional; real environment variables win
load_dotenv(override=False)

DEFAULT_LEXICON_RESOURCE = "goals_lexicon-v1.0.0.yaml"

@dataclass(frozen=True)
class Settings:
    # -------- General ----------
    log_level: str        = os.getenv("LOG_LEVEL", "INFO")

    # -------- Lexicon ----------
    lexicon_resource: str = os.getenv("LEXICON_RESOURCE", DEFAULT_LEXICON_RESOURCE)
    lexicon_path: str     = os.getenv("LEXICON_PATH", "")

    # -------- Scoring knobs ----
    scoring_config_path: str = os.getenv("SCORING_CONFIG_PATH", "")

    # helper: convert to dict (useful for logging)
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_overrides(**kwargs) -> "Settings":
        """
        Build Settings and apply runtime overrides (e.g., parsed CLI flags).
        Only keys that match fields will be overridden.
        """
        base = Settings()
        current = base.to_dict()
        current.update({k: v for k, v in kwargs.items() if k in current and v is not None})
        return Settings(**current)  # type: ignore[arg-type]
