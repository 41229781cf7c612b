from wordslide.backend.engine.gamerules.moves import (
    MoveOutcome,
    move,
    replay_move,
    simulate_move,
)

__all__ = ["MoveOutcome", "move", "replay_move", "simulate_move"]
