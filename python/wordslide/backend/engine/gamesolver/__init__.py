from wordslide.backend.engine.gamesolver.solver import (
    NoSolution,
    Plan,
    PlanStep,
    Solver,
    solve,
)

__all__ = ["NoSolution", "Plan", "PlanStep", "Solver", "solve"]
