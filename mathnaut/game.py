import logging
import random
import sys

import pygame

from .entities import Controls
from .questions import Operation
from .settings import (
    ALIEN_COLOR,
    CHOICE_HIT_HEIGHT,
    CHOICE_HIT_WIDTH,
    DIFFICULTY_NAMES,
    FLAME_COLOR,
    FPS,
    GAME_OVER_COLOR,
    GROUND_COLOR,
    GROUND_HEIGHT,
    HINT_COLOR,
    LIFE_BOX_SIZE,
    LIFE_BOX_SPACING,
    LIFE_COLOR,
    PLAYER_COLOR,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SHUTTLE_COLOR,
    SKY_COLOR,
    TEXT_COLOR,
    VISOR_COLOR,
    WINDOW_TITLE,
    PlayField,
)
from .simulation import GameOver, InputFrame, MainMenu, StateMachine

logger = logging.getLogger(__name__)

FONT_NAME = None  # default font

DIFFICULTY_KEYS = {
    pygame.K_0: 0,
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
}

MODE_KEYS = {
    pygame.K_a: Operation.ADDITION,
    pygame.K_m: Operation.MULTIPLICATION,
    pygame.K_d: Operation.DIVISION,
    pygame.K_x: Operation.MIXED,
}

MODE_HINTS = {
    Operation.ADDITION: "Operation: Addition (Press M for Multiplication, D for Division, X for Mixed)",
    Operation.MULTIPLICATION: "Operation: Multiplication (Press A for Addition, D for Division, X for Mixed)",
    Operation.DIVISION: "Operation: Division (Press A or M to change, X for Mixed)",
    Operation.MIXED: "Operation: Mixed (Press A, M, or D for single ops)",
}


# ------------------------
# Input sampling
# ------------------------
def read_input(events, keys):
    """Turn this frame's KEYDOWN events and held-key table into an InputFrame.

    Only the first difficulty key and the first mode key of the frame count.
    """
    difficulty = None
    mode = None
    restart = False
    for event in events:
        if event.type != pygame.KEYDOWN:
            continue
        if difficulty is None and event.key in DIFFICULTY_KEYS:
            difficulty = DIFFICULTY_KEYS[event.key]
        elif mode is None and event.key in MODE_KEYS:
            mode = MODE_KEYS[event.key]
        elif event.key == pygame.K_SPACE:
            restart = True
    controls = Controls(
        left=bool(keys[pygame.K_LEFT]),
        right=bool(keys[pygame.K_RIGHT]),
        ascend=bool(keys[pygame.K_UP]),
    )
    return InputFrame(controls, difficulty, mode, restart)


# ------------------------
# The Game class
# ------------------------
class MathnautGame:
    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(FONT_NAME, 30)
        self.medium_font = pygame.font.Font(FONT_NAME, 40)
        self.large_font = pygame.font.Font(FONT_NAME, 50)
        self.title_font = pygame.font.Font(FONT_NAME, 60)

        self.field = PlayField(width, height)
        self.machine = StateMachine(self.field)
        self.sim = self.machine.new_state()
        logger.info("Window ready: %dx%d", width, height)

    def quit_game(self):
        pygame.quit()
        sys.exit()

    # ------------------------
    # Main loop
    # ------------------------
    def run(self):
        while True:
            dt = self.clock.tick(FPS) / 1000.0
            inputs = self.handle_events()
            self.machine.tick(self.sim, inputs, dt)
            self.draw(self.machine.snapshot(self.sim), inputs.controls)
            pygame.display.flip()

    def handle_events(self):
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                self.quit_game()
        return read_input(events, pygame.key.get_pressed())

    # ------------------------
    # Drawing
    # ------------------------
    def draw(self, snap, controls):
        self.screen.fill(SKY_COLOR)
        if isinstance(snap.phase, MainMenu):
            self.draw_menu(snap)
        elif isinstance(snap.phase, GameOver):
            self.draw_game_over(snap)
        else:
            self.draw_playing(snap, controls)

    def draw_centered_text(self, text, y, font, color=TEXT_COLOR):
        txt = font.render(text, True, color)
        self.screen.blit(txt, txt.get_rect(center=(self.field.width // 2, y)))

    def draw_menu(self, snap):
        mid = self.field.height // 2
        self.draw_centered_text(WINDOW_TITLE, mid - 150, self.title_font)
        self.draw_centered_text("Select Difficulty Level:", mid - 50, self.medium_font)
        levels = "    ".join(f"{i}: {name}" for i, name in enumerate(DIFFICULTY_NAMES))
        self.draw_centered_text(levels, mid, self.medium_font)
        self.draw_centered_text("Press the corresponding number key to start", mid + 50, self.font, HINT_COLOR)
        self.draw_centered_text(MODE_HINTS[snap.mode], mid + 100, self.font, HINT_COLOR)

    def draw_game_over(self, snap):
        mid = self.field.height // 2
        self.draw_centered_text("GAME OVER", mid, self.title_font, GAME_OVER_COLOR)
        self.draw_centered_text(f"Score: {snap.score}", mid + 80, self.medium_font)
        self.draw_centered_text("Press SPACE to return to Menu", mid + 140, self.font, HINT_COLOR)

    def draw_playing(self, snap, controls):
        player = snap.player
        ground_top = self.field.ground_y + player.height
        pygame.draw.rect(self.screen, GROUND_COLOR,
                         pygame.Rect(0, int(ground_top), int(self.field.width), int(GROUND_HEIGHT)))

        self.draw_centered_text(snap.prompt, 100, self.large_font)
        score = self.medium_font.render(f"Score: {snap.score}", True, TEXT_COLOR)
        self.screen.blit(score, (self.field.width - score.get_width() - 20, 30))

        for choice in snap.choices:
            box = pygame.Rect(int(choice.x), int(choice.y), int(CHOICE_HIT_WIDTH), int(CHOICE_HIT_HEIGHT))
            pygame.draw.rect(self.screen, SHUTTLE_COLOR, box, border_radius=12)
            label = self.large_font.render(choice.text, True, TEXT_COLOR)
            self.screen.blit(label, label.get_rect(center=box.center))

        if controls.ascend:
            self.draw_flame(player)
        self.draw_astronaut(player)

        alien = snap.alien
        pygame.draw.ellipse(self.screen, ALIEN_COLOR,
                            pygame.Rect(int(alien.x), int(alien.y), int(alien.width), int(alien.height)))

        life_x = 10
        life_y = int(ground_top + (GROUND_HEIGHT - LIFE_BOX_SIZE) / 2)
        for _ in range(max(snap.lives, 0)):
            pygame.draw.rect(self.screen, LIFE_COLOR, pygame.Rect(life_x, life_y, LIFE_BOX_SIZE, LIFE_BOX_SIZE))
            life_x += LIFE_BOX_SIZE + LIFE_BOX_SPACING

    def draw_astronaut(self, player):
        body = pygame.Rect(int(player.x), int(player.y), int(player.width), int(player.height))
        pygame.draw.rect(self.screen, PLAYER_COLOR, body, border_radius=14)
        visor_w = body.width // 2
        visor_x = body.right - visor_w - 6 if player.facing_right else body.x + 6
        pygame.draw.rect(self.screen, VISOR_COLOR, pygame.Rect(visor_x, body.y + 10, visor_w, body.height // 3),
                         border_radius=6)

    def draw_flame(self, player):
        # flicker is cosmetic only
        scale = 0.8 + random.random() * 0.5
        w = int(16 * scale)
        h = int(30 * scale)
        x = player.x + 6 if player.facing_right else player.x + player.width - 6 - w
        flame = pygame.Rect(int(x), int(player.y + player.height - 10), w, h)
        pygame.draw.ellipse(self.screen, FLAME_COLOR, flame)


def main():
    logging.basicConfig(level=logging.INFO)
    game = MathnautGame()
    game.run()


# ------------------------
# Run if main
# ------------------------
if __name__ == '__main__':
    main()
