from enum import Enum

from .entities import Locomotion
from .settings import CHOICE_HIT_HEIGHT, CHOICE_HIT_WIDTH


class Outcome(Enum):
    NONE = 'none'
    CORRECT = 'correct'
    INCORRECT = 'incorrect'


def overlaps(ax, ay, aw, ah, bx, by, bw, bh):
    # touching edges do not count
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def check(player, choices):
    """Classify what the player is touching.

    Only a NORMAL player can pick an answer. Choices are tested in list
    order and the first overlap wins; answer boxes never overlap each other,
    so at most one can match.
    """
    if player.locomotion is not Locomotion.NORMAL:
        return Outcome.NONE
    for choice in choices:
        if overlaps(player.pos.x, player.pos.y, player.width, player.height,
                    choice.x, choice.y, CHOICE_HIT_WIDTH, CHOICE_HIT_HEIGHT):
            return Outcome.CORRECT if choice.is_correct else Outcome.INCORRECT
    return Outcome.NONE
