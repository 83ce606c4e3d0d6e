from .settings import CORRECT_REWARD, INITIAL_LIVES


class ScoreLivesTracker:
    """Score and lives for one run."""

    def __init__(self, score=0, lives=INITIAL_LIVES):
        self.score = score
        self.lives = lives

    def reset(self, start_score):
        self.score = start_score
        self.lives = INITIAL_LIVES

    def award(self, amount=CORRECT_REWARD):
        self.score += amount

    def penalize(self):
        self.lives -= 1

    def is_terminal(self):
        return self.lives <= 0
