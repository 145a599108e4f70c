from __future__ import annotations
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

GLOBAL = "global"
ADAPTIVE = "adaptive"
METHODS = (GLOBAL, ADAPTIVE)


@dataclass(frozen=True)
class EqualizationOptions:
    """
    Value-object holding the histogram equalisation parameters.
    One instance is shared by every run so each clone gets the same call.
    """
    method: str = GLOBAL        # "global" or "adaptive" (CLAHE)
    clip_limit: float = 40.0    # adaptive only
    tiles: int = 8              # adaptive only, tiles per axis

    def __post_init__(self):
        if self.method not in METHODS:
            raise ValueError(f"Unknown equalisation method {self.method!r}, expected one of {METHODS}")
        if self.clip_limit <= 0:
            raise ValueError(f"clip_limit must be positive, got {self.clip_limit}")
        if self.tiles < 1:
            raise ValueError(f"tiles must be at least 1, got {self.tiles}")

    @classmethod
    def from_env(cls) -> "EqualizationOptions":
        """Build options from EQUALIZATION_* environment variables."""
        return cls(
            method=os.getenv("EQUALIZATION_METHOD", GLOBAL).strip().lower(),
            clip_limit=float(os.getenv("EQUALIZATION_CLIP_LIMIT", "40.0")),
            tiles=int(os.getenv("EQUALIZATION_TILES", "8")),
        )
