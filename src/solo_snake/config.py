"""Game constants and the session-level configuration dataclass."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# 800x600 canvas split into 20 px cells.
GRID_WIDTH = 40
GRID_HEIGHT = 30
MIN_GRID_SIZE = 4

SCORE_PER_FOOD = 10
INITIAL_INTERVAL_MS = 100
DEFAULT_FRAME_RATE = 60


@dataclass(frozen=True)
class GameConfig:
    """Board size, frame cadence and RNG seed for one game session.

    Supports JSON serialization so a session can be reproduced.
    """

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    frame_rate: int = DEFAULT_FRAME_RATE
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < MIN_GRID_SIZE or self.grid_height < MIN_GRID_SIZE:
            raise ValueError(
                f"Grid dimensions must be at least {MIN_GRID_SIZE}×{MIN_GRID_SIZE}.",
            )
        if self.frame_rate < 1:
            raise ValueError("frame_rate must be at least 1.")

    @property
    def frame_period(self) -> float:
        """Seconds between two frames."""
        return 1.0 / self.frame_rate

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
