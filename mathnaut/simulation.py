"""Frame-stepped game logic.

One call to `StateMachine.tick` advances everything by one frame. All
mutable run data lives in a `SimulationState` that the caller owns and
passes back in on every tick; the renderer only ever sees a `Snapshot`.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from . import collision
from .collision import Outcome
from .entities import Alien, Controls, Locomotion, Player
from .questions import AnswerChoice, Operation, Question, QuestionGenerator
from .scoring import ScoreLivesTracker
from .settings import CORRECT_REWARD, DIFFICULTY_NAMES, DIFFICULTY_START_SCORES, PAUSE_DURATION, PlayField

logger = logging.getLogger(__name__)


# ------------------------
# Phases
# ------------------------
@dataclass(frozen=True)
class MainMenu:
    pass


@dataclass(frozen=True)
class Playing:
    pass


@dataclass(frozen=True)
class PostAnswerPause:
    remaining: float = PAUSE_DURATION


@dataclass(frozen=True)
class GameOver:
    pass


Phase = Union[MainMenu, Playing, PostAnswerPause, GameOver]


# ------------------------
# Input & state
# ------------------------
@dataclass(frozen=True)
class InputFrame:
    """Signals for a single tick.

    `controls` are held keys. `difficulty`, `mode` and `restart` are
    presses that happened this tick only.
    """
    controls: Controls = Controls()
    difficulty: Optional[int] = None
    mode: Optional[Operation] = None
    restart: bool = False

    def __post_init__(self):
        if self.difficulty is not None and not 0 <= self.difficulty < len(DIFFICULTY_START_SCORES):
            raise ValueError(f"unknown difficulty level {self.difficulty}")


@dataclass
class SimulationState:
    player: Player
    alien: Alien
    phase: Phase = MainMenu()
    run: ScoreLivesTracker = field(default_factory=ScoreLivesTracker)
    mode: Operation = Operation.ADDITION
    question: Optional[Question] = None


@dataclass(frozen=True)
class PlayerPose:
    x: float
    y: float
    vx: float
    vy: float
    width: float
    height: float
    locomotion: Locomotion
    facing_right: bool


@dataclass(frozen=True)
class AlienPose:
    x: float
    y: float
    width: float
    height: float
    speed: float


@dataclass(frozen=True)
class Snapshot:
    phase: Phase
    score: int
    lives: int
    mode: Operation
    player: PlayerPose
    alien: AlienPose
    prompt: str
    choices: Tuple[AnswerChoice, ...]


# ------------------------
# State machine
# ------------------------
class StateMachine:
    def __init__(self, play_field=None, generator=None):
        self.field = play_field or PlayField()
        self.generator = generator or QuestionGenerator(self.field.width)

    def new_state(self):
        return SimulationState(player=Player.spawn(self.field), alien=Alien())

    def tick(self, state, inputs, dt):
        if dt < 0:
            raise ValueError(f"dt must not be negative, got {dt}")

        phase = state.phase
        if isinstance(phase, MainMenu):
            self._update_menu(state, inputs)
        elif isinstance(phase, Playing):
            self._update_playing(state, inputs, dt)
        elif isinstance(phase, PostAnswerPause):
            self._update_pause(state, phase, dt)
        elif isinstance(phase, GameOver):
            if inputs.restart:
                self._enter(state, MainMenu())
        return state

    def _enter(self, state, phase):
        logger.info("Phase %s -> %s", type(state.phase).__name__, type(phase).__name__)
        state.phase = phase

    def _update_menu(self, state, inputs):
        if inputs.mode is not None and inputs.mode is not state.mode:
            state.mode = inputs.mode
            logger.info("Operation set to %s", state.mode.label)
        if inputs.difficulty is not None:
            self.start_run(state, inputs.difficulty)

    def start_run(self, state, level):
        state.run.reset(DIFFICULTY_START_SCORES[level])
        self.new_round(state)
        logger.info("Starting %s run at score %d", DIFFICULTY_NAMES[level], state.run.score)
        self._enter(state, Playing())

    def new_round(self, state):
        """Put player and alien back at their spawn and ask a fresh question."""
        state.player = Player.spawn(self.field)
        state.alien.reset()
        state.question = self.generator.generate(state.run.score, state.mode)

    def _update_playing(self, state, inputs, dt):
        run = state.run
        state.player.update(inputs.controls, self.field)

        if state.alien.update(dt, run.score, self.field):
            run.penalize()
            logger.info("Alien landed! Lives remaining: %d", run.lives)
            if run.is_terminal():
                self._enter(state, GameOver())
                return
            self.new_round(state)

        outcome = collision.check(state.player, state.question.choices)
        if outcome is Outcome.CORRECT:
            run.award(CORRECT_REWARD)
            logger.info("Correct! Score: %d", run.score)
            self._enter(state, PostAnswerPause(PAUSE_DURATION))
        elif outcome is Outcome.INCORRECT:
            run.penalize()
            logger.info("Wrong answer! Lives remaining: %d", run.lives)
            if run.is_terminal():
                self._enter(state, GameOver())
            else:
                state.player.fail()

    def _update_pause(self, state, phase, dt):
        remaining = phase.remaining - dt
        if remaining <= 0:
            self.new_round(state)
            self._enter(state, Playing())
        else:
            state.phase = replace(phase, remaining=remaining)

    def snapshot(self, state):
        p = state.player
        a = state.alien
        q = state.question
        return Snapshot(
            phase=state.phase,
            score=state.run.score,
            lives=state.run.lives,
            mode=state.mode,
            player=PlayerPose(p.pos.x, p.pos.y, p.vel.x, p.vel.y, p.width, p.height,
                              p.locomotion, p.facing_right),
            alien=AlienPose(a.pos.x, a.pos.y, a.width, a.height, a.speed),
            prompt=q.prompt if q else '',
            choices=q.choices if q else (),
        )
