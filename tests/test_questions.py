"""
Unit Tests for Question Generation

Covers operand ramps, question shape per operation, distractor sampling
and the on-screen layout of the answer boxes.
"""

import re

import pytest

from mathnaut.questions import (
    AnswerChoice,
    Operation,
    QuestionGenerator,
    layout_choices,
    operand_bound,
)
from mathnaut.settings import CHOICE_HIT_WIDTH, CHOICE_Y, PRODUCT_CAP


class ScriptedRng:
    """Stands in for random.Random with a fixed sequence of randint results."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, a, b):
        return self.values.pop(0)


class TestOperandBound:
    """Tests for the score-driven operand ceilings."""

    def test_bound_when_score_zero_then_starting_values(self):
        assert operand_bound(0, Operation.ADDITION) == 10
        assert operand_bound(0, Operation.MULTIPLICATION) == 5
        assert operand_bound(0, Operation.DIVISION) == 5

    def test_bound_when_score_crosses_interval_then_steps_up(self):
        assert operand_bound(499, Operation.ADDITION) == 10
        assert operand_bound(500, Operation.ADDITION) == 20
        assert operand_bound(500, Operation.MULTIPLICATION) == 10
        assert operand_bound(1000, Operation.DIVISION) == 15

    def test_bound_when_score_large_then_addition_keeps_growing(self):
        assert operand_bound(10000, Operation.ADDITION) == 210

    def test_bound_when_score_large_then_products_capped(self):
        assert operand_bound(10000, Operation.MULTIPLICATION) == PRODUCT_CAP
        assert operand_bound(10000, Operation.DIVISION) == PRODUCT_CAP

    @pytest.mark.parametrize("operation", [Operation.ADDITION, Operation.MULTIPLICATION, Operation.DIVISION])
    def test_bound_when_score_rises_then_never_decreases(self, operation):
        bounds = [operand_bound(s, operation) for s in range(0, 6000, 100)]
        assert bounds == sorted(bounds)

    def test_bound_when_mixed_then_raises_error(self):
        with pytest.raises(ValueError):
            operand_bound(0, Operation.MIXED)


class TestGenerate:
    """Tests for QuestionGenerator.generate."""

    # ─────────────────────────────────────────────────────────────────────────
    # Shape of every question
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("mode", list(Operation))
    @pytest.mark.parametrize("score", [0, 500, 1000, 1500, 4200])
    def test_generate_when_any_mode_then_one_correct_of_four(self, generator, score, mode):
        for _ in range(20):
            q = generator.generate(score, mode)
            assert len(q.choices) == 4
            correct = [c for c in q.choices if c.is_correct]
            assert len(correct) == 1
            assert correct[0].value == q.answer
            for wrong in (c for c in q.choices if not c.is_correct):
                assert wrong.value != q.answer

    def test_generate_when_addition_at_zero_then_prompt_matches_operands(self, generator):
        for _ in range(50):
            q = generator.generate(0, Operation.ADDITION)
            m = re.fullmatch(r"(\d+) \+ (\d+) = \?", q.prompt)
            assert m is not None
            n1, n2 = int(m.group(1)), int(m.group(2))
            assert 1 <= n1 <= 10 and 1 <= n2 <= 10
            assert q.answer == n1 + n2
            assert q.correct_choice.text == str(n1 + n2)

    def test_generate_when_multiplication_then_product(self, generator):
        q = generator.generate(0, Operation.MULTIPLICATION)
        a, b = q.operands
        assert q.prompt == f"{a} × {b} = ?"
        assert q.answer == a * b

    def test_generate_when_division_then_exact_quotient(self, generator):
        for _ in range(50):
            q = generator.generate(1500, Operation.DIVISION)
            dividend, divisor = q.operands
            assert q.prompt == f"{dividend} ÷ {divisor} = ?"
            assert 1 <= divisor <= PRODUCT_CAP
            assert dividend == divisor * q.answer
            assert q.correct_choice.value == dividend // divisor

    def test_generate_when_single_mode_then_operation_recorded(self, generator):
        q = generator.generate(0, Operation.DIVISION)
        assert q.operation is Operation.DIVISION

    def test_generate_when_mixed_then_each_call_draws_operation(self, generator):
        ops = {generator.generate(0, Operation.MIXED).operation for _ in range(200)}
        assert ops == {Operation.ADDITION, Operation.MULTIPLICATION, Operation.DIVISION}

    def test_generate_when_distractors_then_within_double_bound(self, generator):
        for _ in range(50):
            q = generator.generate(0, Operation.ADDITION)
            for c in q.choices:
                if not c.is_correct:
                    assert 1 <= c.value <= 20

    # ─────────────────────────────────────────────────────────────────────────
    # Distractor sampling
    # ─────────────────────────────────────────────────────────────────────────

    def test_distractors_when_draw_hits_answer_then_redraws(self):
        gen = QuestionGenerator(1024, ScriptedRng([5, 5, 3, 9, 5, 2]))
        assert gen.distractors(5, 10) == [3, 9, 2]

    def test_distractors_when_draws_repeat_then_duplicates_kept(self):
        gen = QuestionGenerator(1024, ScriptedRng([4, 4, 4]))
        assert gen.distractors(5, 10) == [4, 4, 4]


class TestLayout:
    """Tests for answer box placement."""

    def test_layout_when_default_width_then_evenly_spaced(self):
        choices = [AnswerChoice(str(i), i, i == 0) for i in range(4)]
        placed = layout_choices(choices, 1024)
        assert [c.x for c in placed] == pytest.approx([163.0, 369.0, 575.0, 781.0])
        assert all(c.y == CHOICE_Y for c in placed)

    def test_layout_when_generated_then_boxes_do_not_overlap(self, generator):
        q = generator.generate(0, Operation.ADDITION)
        xs = sorted(c.x for c in q.choices)
        for left, right in zip(xs, xs[1:]):
            assert left + CHOICE_HIT_WIDTH <= right

    def test_layout_when_width_changes_then_positions_follow(self):
        choices = [AnswerChoice(str(i), i, i == 0) for i in range(4)]
        narrow = layout_choices(choices, 800)
        wide = layout_choices(choices, 1200)
        assert narrow[-1].x < wide[-1].x
