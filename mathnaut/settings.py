from dataclasses import dataclass

# Configuration constants
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
FPS = 60
WINDOW_TITLE = 'Math Game'

# Ground: the player's feet rest on GROUND_Y, the band below is decoration
GROUND_Y = 600.0
GROUND_HEIGHT = 150.0

# Player movement (pixels per tick)
MOVE_SPEED = 3.0
BOOST = 0.3
GRAVITY = 0.2
PLAYER_WIDTH = 60.0
PLAYER_HEIGHT = 60.0
PLAYER_SPAWN_LIFT = 50.0  # spawn this far above the ground line

# The alien occupies the left edge; the player may not walk into it
ALIEN_SPRITE_WIDTH = 60.0
ALIEN_WALL_BUFFER = 10.0
ALIEN_WALL = ALIEN_SPRITE_WIDTH + ALIEN_WALL_BUFFER

# Alien descent (pixels per second)
ALIEN_WIDTH = 200.0
ALIEN_HEIGHT = 200.0
ALIEN_BASE_SPEED = 50.0
ALIEN_SPEED_THRESHOLD = 500
ALIEN_SPEED_INTERVAL = 1000
ALIEN_SPEED_STEP = 25.0

# Run
INITIAL_LIVES = 10
CORRECT_REWARD = 100
PAUSE_DURATION = 0.5  # seconds frozen after a correct answer

# Difficulty level -> starting score
DIFFICULTY_NAMES = ['Easy', 'Medium', 'Hard', 'Very Hard']
DIFFICULTY_START_SCORES = [0, 500, 1000, 1500]

# Operand ramps
BOUND_SCORE_INTERVAL = 500
ADDITION_BASE = 10
ADDITION_STEP = 10
PRODUCT_BASE = 5  # multiplication and division share this ramp
PRODUCT_STEP = 5
PRODUCT_CAP = 15

# Answer boxes
NUM_CHOICES = 4
CHOICE_MARGIN = 100.0
CHOICE_CENTER_OFFSET = 40.0
CHOICE_Y = 200.0
CHOICE_HIT_WIDTH = 100.0
CHOICE_HIT_HEIGHT = 80.0

# Colors
SKY_COLOR = (102, 191, 255)
GROUND_COLOR = (127, 106, 79)
TEXT_COLOR = (0, 0, 0)
HINT_COLOR = (80, 80, 80)
LIFE_COLOR = (230, 41, 55)
GAME_OVER_COLOR = (230, 41, 55)
PLAYER_COLOR = (235, 235, 245)
VISOR_COLOR = (40, 60, 110)
FLAME_COLOR = (255, 161, 0)
SHUTTLE_COLOR = (200, 200, 210)
ALIEN_COLOR = (0, 158, 47)

LIFE_BOX_SIZE = 20
LIFE_BOX_SPACING = 5


# ------------------------
# Play-field geometry
# ------------------------
@dataclass(frozen=True)
class PlayField:
    """Dimensions handed to the simulation by the window layer."""
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    ground_y: float = GROUND_Y

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"play field must have a positive size, got {self.width}x{self.height}")
        if not 0 < self.ground_y <= self.height:
            raise ValueError(f"ground line {self.ground_y} lies outside the play field")

    @property
    def player_min_x(self):
        return ALIEN_WALL

    @property
    def player_max_x(self):
        return self.width - PLAYER_WIDTH
