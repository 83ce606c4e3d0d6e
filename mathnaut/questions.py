import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .settings import (
    ADDITION_BASE,
    ADDITION_STEP,
    BOUND_SCORE_INTERVAL,
    CHOICE_CENTER_OFFSET,
    CHOICE_MARGIN,
    CHOICE_Y,
    NUM_CHOICES,
    PRODUCT_BASE,
    PRODUCT_CAP,
    PRODUCT_STEP,
)

logger = logging.getLogger(__name__)


class Operation(Enum):
    ADDITION = 'addition'
    MULTIPLICATION = 'multiplication'
    DIVISION = 'division'
    MIXED = 'mixed'

    @property
    def label(self):
        return self.value.capitalize()


CONCRETE_OPERATIONS = (Operation.ADDITION, Operation.MULTIPLICATION, Operation.DIVISION)

SYMBOLS = {
    Operation.ADDITION: '+',
    Operation.MULTIPLICATION: '×',
    Operation.DIVISION: '÷',
}


# ------------------------
# Question data
# ------------------------
@dataclass(frozen=True)
class AnswerChoice:
    text: str
    value: int
    is_correct: bool
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Question:
    prompt: str
    operation: Operation
    operands: Tuple[int, int]  # as displayed, e.g. (dividend, divisor)
    answer: int
    choices: Tuple[AnswerChoice, ...]

    @property
    def correct_choice(self):
        return next(c for c in self.choices if c.is_correct)


# ------------------------
# Difficulty ramps
# ------------------------
def operand_bound(score, operation):
    """Largest operand drawn for `operation` at `score`.

    Addition keeps growing with score; multiplication and division level
    off at PRODUCT_CAP.
    """
    steps = max(score, 0) // BOUND_SCORE_INTERVAL
    if operation is Operation.ADDITION:
        return ADDITION_BASE + steps * ADDITION_STEP
    if operation in (Operation.MULTIPLICATION, Operation.DIVISION):
        return min(PRODUCT_BASE + steps * PRODUCT_STEP, PRODUCT_CAP)
    raise ValueError(f"{operation} has no operand bound of its own")


def layout_choices(choices, field_width):
    """Spread choices evenly across the field, keeping CHOICE_MARGIN at each side."""
    slot_width = (field_width - 2 * CHOICE_MARGIN) / len(choices)
    placed = []
    for i, choice in enumerate(choices):
        x = CHOICE_MARGIN + slot_width * (i + 0.5) - CHOICE_CENTER_OFFSET
        placed.append(AnswerChoice(choice.text, choice.value, choice.is_correct, x, CHOICE_Y))
    return tuple(placed)


# ------------------------
# Generator
# ------------------------
class QuestionGenerator:
    """Procedural arithmetic questions whose size follows the score."""

    def __init__(self, field_width, rng=None):
        self.field_width = field_width
        self.rng = rng or random.Random()

    def pick_operation(self, mode):
        # Mixed draws afresh on every question
        if mode is Operation.MIXED:
            return self.rng.choice(CONCRETE_OPERATIONS)
        return mode

    def generate(self, score, mode):
        operation = self.pick_operation(mode)
        bound = operand_bound(score, operation)
        rng = self.rng

        if operation is Operation.DIVISION:
            divisor = rng.randint(1, bound)
            quotient = rng.randint(1, bound)
            operands = (divisor * quotient, divisor)
            answer = quotient
        else:
            a = rng.randint(1, bound)
            b = rng.randint(1, bound)
            operands = (a, b)
            answer = a + b if operation is Operation.ADDITION else a * b
        prompt = f"{operands[0]} {SYMBOLS[operation]} {operands[1]} = ?"

        choices = [AnswerChoice(str(answer), answer, True)]
        for wrong in self.distractors(answer, bound):
            choices.append(AnswerChoice(str(wrong), wrong, False))
        rng.shuffle(choices)

        question = Question(prompt, operation, operands, answer, layout_choices(choices, self.field_width))
        logger.debug("Generated %r (mode=%s, bound=%d)", prompt, mode.label, bound)
        return question

    def distractors(self, answer, bound):
        # Each wrong value only has to differ from the answer; repeats among
        # the distractors themselves are allowed.
        values = []
        for _ in range(NUM_CHOICES - 1):
            wrong = self.rng.randint(1, 2 * bound)
            while wrong == answer:
                wrong = self.rng.randint(1, 2 * bound)
            values.append(wrong)
        return values
