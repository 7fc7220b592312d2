"""Pygame GUI frontend.

Opens a square window, forwards key-down events to the game, steps it
once per display frame and draws the resulting vertex batches. The two
images come from ``assets/images/`` when present and are generated
otherwise.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

import pygame

from backend.engine.gameinput import DIRECTION_TO_KEY
from backend.engine.gameplay import GamePlay
from backend.engine.gamerender import Layout
from backend.engine.gamesolver import Solver
from backend.models.geometry import Texture
from backend.models.keys import Key
from frontend.gui.pygame.renderer import QuadRenderer
from frontend.quote import QUOTE_AUTHOR, QUOTE_TEXT

logger = logging.getLogger(__name__)

PUZZLE_IMAGE = "puzzle.png"
QUOTE_IMAGE = "quote.png"

_KEYS: dict[int, Key] = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP_ARROW,
    pygame.K_LEFT: Key.LEFT_ARROW,
    pygame.K_DOWN: Key.DOWN_ARROW,
    pygame.K_RIGHT: Key.RIGHT_ARROW,
}


# ---------------------------------------------------------------------------
# Image sources
# ---------------------------------------------------------------------------
def _generated_puzzle(size: int) -> pygame.Surface:
    """Concentric rings on a night sky, distinct enough to solve by eye."""
    surf = pygame.Surface((size, size))
    surf.fill((8, 10, 28))
    center = (size // 2, size // 2)
    for i, radius in enumerate(range(size // 2, 0, -size // 24)):
        shade = 40 + (i * 37) % 180
        pygame.draw.circle(surf, (shade // 3, shade // 2 + 40, shade), center, radius)
    for i in range(1, 4):
        pygame.draw.line(surf, (240, 200, 90), (0, i * size // 4), (size, size - i * size // 4), 3)
    return surf


def _generated_quote(width: int) -> pygame.Surface:
    body = pygame.font.SysFont("Georgia", max(12, width // 28), italic=True)
    small = pygame.font.SysFont("Georgia", max(10, width // 36))
    line = body.render(QUOTE_TEXT, True, (230, 230, 240))
    author = small.render(f"— {QUOTE_AUTHOR}", True, (150, 150, 170))
    surf = pygame.Surface(
        (max(line.get_width(), author.get_width()) + 20, line.get_height() + author.get_height() + 20)
    )
    surf.fill((3, 3, 5))
    surf.blit(line, (10, 10))
    surf.blit(author, (surf.get_width() - author.get_width() - 10, 10 + line.get_height()))
    return surf


def _load_image(path: Path) -> pygame.Surface | None:
    if not path.is_file():
        return None
    try:
        return pygame.image.load(str(path)).convert()
    except pygame.error as exc:
        logger.warning("Could not load %s: %s", path, exc)
        return None


def load_textures(images_dir: Path, canvas_size: int) -> dict[Texture, pygame.Surface]:
    puzzle = _load_image(images_dir / PUZZLE_IMAGE)
    if puzzle is None:
        logger.warning("No %s in %s, using a generated image", PUZZLE_IMAGE, images_dir)
        puzzle = _generated_puzzle(480)
    quote = _load_image(images_dir / QUOTE_IMAGE)
    if quote is None:
        logger.warning("No %s in %s, using a generated quote", QUOTE_IMAGE, images_dir)
        # Leave room for the quote below the grid.
        quote = _generated_quote(int(0.7 * canvas_size))
    return {Texture.PRIMARY: puzzle, Texture.QUOTE: quote}


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(
        self, seed: int | None, canvas_size: int, fps: int, images_dir: Path
    ) -> None:
        self._seed = seed
        self._fps = fps

        pygame.init()
        self._surf = pygame.display.set_mode((canvas_size, canvas_size))
        pygame.display.set_caption("Sliding Puzzle")
        self._clock = pygame.time.Clock()

        self._textures = load_textures(images_dir, canvas_size)
        self._layout = Layout(canvas_size, canvas_size)
        self._renderer = QuadRenderer(self._surf, self._textures)
        self._game = self._new_game(seed)

    @staticmethod
    def _now() -> float:
        return pygame.time.get_ticks() / 1000

    def _new_game(self, seed: int | None) -> GamePlay:
        quote_size = self._textures[Texture.QUOTE].get_size()
        if seed is None:
            return GamePlay.from_clock(
                time.time(), now=self._now(), layout=self._layout, quote_size=quote_size
            )
        return GamePlay(seed, now=self._now(), layout=self._layout, quote_size=quote_size)

    # ── event handling ──────────────────────────────────────────────────────

    def _on_key(self, ev: pygame.event.Event) -> bool:
        if ev.key in _KEYS:
            self._game.on_key_down(_KEYS[ev.key])
        elif ev.key == pygame.K_n:
            hint = Solver.hint(self._game.state.board)
            if hint is not None and not self._game.is_won:
                self._game.on_key_down(DIRECTION_TO_KEY[hint])
        elif ev.key == pygame.K_r:
            self._game = self._new_game(None)
        elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
            return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if ev.type == pygame.KEYDOWN and not self._on_key(ev):
                    running = False
                    break

            frame = self._game.step(self._now())
            self._renderer.draw(frame)
            pygame.display.flip()
            self._clock.tick(self._fps)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    seed: int | None = None,
    canvas_size: int = 800,
    fps: int = 60,
    images_dir: Path = Path("assets/images"),
) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(seed, canvas_size, fps, images_dir)
    app.run_loop()
