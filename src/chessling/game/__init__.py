"""Game management layer — session, orchestrator, progression, captures.

Quick start::

    from chessling.game import GameController

    ctrl = GameController()
    ctrl.events.on_feedback.append(print)
    ctrl.new_game()
    ctrl.submit_human_move("e2", "e4")
"""

from chessling.game.captures import (
    STANDARD_COUNTS,
    CapturedSets,
    MaterialCount,
    compute_captures,
    material_count,
)
from chessling.game.controller import GameController, GameEvents
from chessling.game.interfaces import (
    GamePhase,
    IGameController,
    Scheduler,
    Verdict,
    run_immediately,
)
from chessling.game.progression import (
    MoveClassification,
    MoveKind,
    ProgressionState,
    XpAward,
    award_xp,
    classify_move,
)
from chessling.game.session import GameOverInfo, GameSession

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "Scheduler",
    "Verdict",
    "run_immediately",
    # Concrete
    "GameController",
    "GameEvents",
    "GameOverInfo",
    "GameSession",
    # Progression
    "MoveClassification",
    "MoveKind",
    "ProgressionState",
    "XpAward",
    "award_xp",
    "classify_move",
    # Captures
    "STANDARD_COUNTS",
    "CapturedSets",
    "MaterialCount",
    "compute_captures",
    "material_count",
]
