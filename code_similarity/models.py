from dataclasses import dataclass
from typing import Optional


@dataclass
class CodeFile:
    name: str
    content: str


@dataclass
class PlagiarismMatch:
    name: str
    score: float
    band: str
    near_identical: bool

    def to_dict(self):
        return {
            "name": self.name,
            "score": round(self.score, 4),
            "band": self.band,
            "near_identical": self.near_identical,
        }


@dataclass
class VariantCheck:
    index: int
    name: str
    score: float
    band: str
    duplicate_of_original: bool
    duplicate_of_variant: Optional[int] = None

    @property
    def is_duplicate(self) -> bool:
        return self.duplicate_of_original or self.duplicate_of_variant is not None

    def to_dict(self):
        return {
            "index": self.index,
            "name": self.name,
            "score": round(self.score, 4),
            "band": self.band,
            "duplicate_of_original": self.duplicate_of_original,
            "duplicate_of_variant": self.duplicate_of_variant,
        }
