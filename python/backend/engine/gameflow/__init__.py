from backend.engine.gameflow.controller import GameFlowController, validate_username
from backend.engine.gameflow.presentation import MessageKind, Presentation, Screen

__all__ = [
    "GameFlowController",
    "MessageKind",
    "Presentation",
    "Screen",
    "validate_username",
]
