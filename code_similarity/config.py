import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ConfigError

HIGH = "high"
MEDIUM = "medium"
LOW = "low"


@dataclass(frozen=True)
class Thresholds:
    """
    Score policy applied by callers of the engine.

    Scores strictly above a threshold fall in its band, so 0.98 itself is not a duplicate.
    """

    duplicate: float = 0.98
    high: float = 0.95
    medium: float = 0.70
    plagiarism_high: float = 0.75
    plagiarism_medium: float = 0.40

    @classmethod
    def from_config(cls, cfg: Optional[Dict[str, Any]] = None) -> "Thresholds":
        cfg = cfg or {}
        try:
            thresholds = cls(
                duplicate=float(cfg.get("duplicate_threshold", cls.duplicate)),
                high=float(cfg.get("high_threshold", cls.high)),
                medium=float(cfg.get("medium_threshold", cls.medium)),
                plagiarism_high=float(cfg.get("plagiarism_high_threshold", cls.plagiarism_high)),
                plagiarism_medium=float(cfg.get("plagiarism_medium_threshold", cls.plagiarism_medium)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid threshold value: {e}") from e
        thresholds.validate()
        return thresholds

    def validate(self) -> None:
        for name in ("duplicate", "high", "medium", "plagiarism_high", "plagiarism_medium"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} threshold must be within [0, 1], got {value}")
        if self.medium > self.high:
            raise ConfigError("medium threshold is above high threshold")
        if self.plagiarism_medium > self.plagiarism_high:
            raise ConfigError("plagiarism_medium threshold is above plagiarism_high threshold")


def band(score: float, high: float, medium: float) -> str:
    if score > high:
        return HIGH
    if score > medium:
        return MEDIUM
    return LOW


def load_config(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")
    return data
