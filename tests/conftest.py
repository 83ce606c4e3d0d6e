import random

import pytest

from mathnaut.questions import QuestionGenerator
from mathnaut.settings import PlayField
from mathnaut.simulation import StateMachine


# Common test fixtures
@pytest.fixture
def field():
    """Default 1024x768 play field with the ground at y=600."""
    return PlayField()


@pytest.fixture
def rng():
    """Seeded RNG so generated questions are reproducible."""
    return random.Random(1234)


@pytest.fixture
def generator(field, rng):
    return QuestionGenerator(field.width, rng)


@pytest.fixture
def machine(field, generator):
    return StateMachine(field, generator)


@pytest.fixture
def state(machine):
    return machine.new_state()
