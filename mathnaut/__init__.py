"""Mathnaut: steer the astronaut to the right answer before the alien lands."""
from .questions import AnswerChoice, Operation, Question, QuestionGenerator
from .settings import PlayField
from .simulation import (
    GameOver,
    InputFrame,
    MainMenu,
    Playing,
    PostAnswerPause,
    SimulationState,
    Snapshot,
    StateMachine,
)

__version__ = '0.1.0'
