"""Headless games with random input, for smoke tests and throughput checks."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from solo_snake.config import GRID_HEIGHT, GRID_WIDTH, GameConfig
from solo_snake.engine import GameEngine, GameListener

logger = logging.getLogger(__name__)

_STEER_KEYS = ("ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight")


@dataclass
class SimulationResult:
    """Aggregate results from a batch of simulated games."""

    total_games: int
    total_ticks: int
    best_score: int
    mean_score: float
    victories: int
    wall_time_seconds: float

    @property
    def ticks_per_second(self) -> float:
        return self.total_ticks / max(self.wall_time_seconds, 1e-9)

    def summary(self) -> str:
        return (
            f"Simulation: {self.total_games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | best {self.best_score}, "
            f"mean {self.mean_score:.1f}, {self.victories} victories, "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


class _ScoreTracker(GameListener):
    def __init__(self) -> None:
        self.final_scores: list[int] = []
        self.victories = 0

    def on_game_over(self, final_score: int, victory: bool) -> None:
        self.final_scores.append(final_score)
        if victory:
            self.victories += 1


def simulate_games(
    *,
    num_games: int = 10,
    grid_width: int = GRID_WIDTH,
    grid_height: int = GRID_HEIGHT,
    max_ticks: int = 1_000,
    turn_prob: float = 0.2,
    seed: int | None = 42,
) -> SimulationResult:
    """Play *num_games* games with random steering.

    Frames are fed synthetic timestamps exactly one tick interval apart,
    so every frame after the first fires a tick. A game that is still
    alive after *max_ticks* counts with its current score.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    rng = np.random.default_rng(seed)
    tracker = _ScoreTracker()
    total_ticks = 0
    start = time.perf_counter()

    for _ in range(num_games):
        config = GameConfig(
            grid_width=grid_width,
            grid_height=grid_height,
            seed=int(rng.integers(2**31)),
        )
        engine = GameEngine(config, listener=tracker)
        engine.handle_key(" ")
        now = 0.0
        engine.frame(now)
        ticks = 0
        while not engine.state.over and ticks < max_ticks:
            if rng.random() < turn_prob:
                engine.handle_key(_STEER_KEYS[int(rng.integers(len(_STEER_KEYS)))])
            now += engine.state.interval_ms
            if engine.frame(now):
                ticks += 1
        if not engine.state.over:
            tracker.final_scores.append(engine.state.score)
        total_ticks += ticks

    elapsed = time.perf_counter() - start
    scores = tracker.final_scores
    result = SimulationResult(
        total_games=num_games,
        total_ticks=total_ticks,
        best_score=max(scores),
        mean_score=float(np.mean(scores)),
        victories=tracker.victories,
        wall_time_seconds=elapsed,
    )
    logger.info(result.summary())
    return result
