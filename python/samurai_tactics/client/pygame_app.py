"""Pygame front-end for Samurai Tactics."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - handled at runtime
    raise SystemExit(
        "Pygame is required for the graphical client. Install it with 'pip install pygame'."
    ) from exc

from ..game.board import BOARD_COLS, BOARD_ROWS, Coord
from ..game.pieces import Kind, Owner
from ..game.rules import GameSession, SelectResult


LOG = logging.getLogger("samurai_tactics.client")


# ---------------------------------------------------------------------------
# Rendering configuration
# ---------------------------------------------------------------------------

FPS = 30
DEFAULT_CELL_SIZE = 96
BOARD_ORIGIN = (40, 40)
GAP = 4
PANEL_HEIGHT = 140

BACKGROUND = (31, 31, 36)
CELL_COLOR = (0, 0, 0)
CELL_HOVER = (75, 85, 99)
DESTINATION_COLOR = (202, 138, 4)
SELECTION_COLOR = (251, 146, 60)
PIECE_COLORS = {Owner.RED: (239, 68, 68), Owner.BLUE: (59, 130, 246)}
TEXT_COLOR = (240, 240, 240)

PIECE_LETTERS = {
    Kind.SAMURAI: "S",
    Kind.RONIN: "R",
    Kind.DAIMYO: "D",
    Kind.NINJA: "N",
}


def window_size(cell_size: int) -> Tuple[int, int]:
    width = BOARD_ORIGIN[0] * 2 + BOARD_COLS * (cell_size + GAP) - GAP
    height = BOARD_ORIGIN[1] * 2 + BOARD_ROWS * (cell_size + GAP) - GAP + PANEL_HEIGHT
    return width, height


def cell_rect(row: int, col: int, cell_size: int) -> pygame.Rect:
    x = BOARD_ORIGIN[0] + col * (cell_size + GAP)
    y = BOARD_ORIGIN[1] + row * (cell_size + GAP)
    return pygame.Rect(x, y, cell_size, cell_size)


def cell_at(pos: Tuple[int, int], cell_size: int) -> Optional[Coord]:
    for row in range(BOARD_ROWS):
        for col in range(BOARD_COLS):
            if cell_rect(row, col, cell_size).collidepoint(pos):
                return row, col
    return None


@dataclass
class Button:
    label: str
    rect: pygame.Rect

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, hovered: bool) -> None:
        base_color = (33, 150, 243)
        color = tuple(min(c + 40, 255) for c in base_color) if hovered else base_color
        pygame.draw.rect(surface, color, self.rect, border_radius=6)
        pygame.draw.rect(surface, (13, 71, 161), self.rect, width=2, border_radius=6)
        text_surf = font.render(self.label, True, (255, 255, 255))
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def contains(self, pos: Tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


class SamuraiTacticsApp:
    def __init__(self, cell_size: int = DEFAULT_CELL_SIZE) -> None:
        pygame.init()
        pygame.display.set_caption("Samurai Tactics")
        self.cell_size = cell_size
        width, height = window_size(cell_size)
        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()

        self.font_small = pygame.font.Font(None, 24)
        self.font_medium = pygame.font.Font(None, 32)
        self.font_piece = pygame.font.Font(None, cell_size // 2)

        self.buttons = [
            Button("Restart Game", pygame.Rect(BOARD_ORIGIN[0], height - 70, width - 2 * BOARD_ORIGIN[0], 45)),
        ]

        self.session = GameSession()
        self.message: Optional[str] = None

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------
    def handle_click(self, pos: Tuple[int, int]) -> None:
        for button in self.buttons:
            if button.contains(pos):
                self.session.reset()
                self.message = None
                return

        clicked = cell_at(pos, self.cell_size)
        if clicked is None:
            return

        result = self.session.select(*clicked)
        self.message = self._format_result(result)

    @staticmethod
    def _format_result(result: SelectResult) -> Optional[str]:
        move = result.move
        if move is None:
            return None
        if move.captured is None:
            return f"{move.piece} moved {move.origin} → {move.target}"
        return f"{move.piece} captured {move.captured} at {move.target}"

    # ------------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------------
    def draw(self) -> None:
        self.screen.fill(BACKGROUND)
        state = self.session.get_render_state()
        mouse_pos = pygame.mouse.get_pos()

        for row in range(BOARD_ROWS):
            for col in range(BOARD_COLS):
                rect = cell_rect(row, col, self.cell_size)
                if (row, col) in state.legal_destinations:
                    color = DESTINATION_COLOR
                elif rect.collidepoint(mouse_pos):
                    color = CELL_HOVER
                else:
                    color = CELL_COLOR
                pygame.draw.rect(self.screen, color, rect, border_radius=4)

                piece = state.board.piece_at(row, col)
                if piece is not None:
                    radius = self.cell_size // 3
                    pygame.draw.circle(self.screen, PIECE_COLORS[piece.owner], rect.center, radius)
                    text = self.font_piece.render(PIECE_LETTERS[piece.kind], True, TEXT_COLOR)
                    self.screen.blit(text, text.get_rect(center=rect.center))

                if (row, col) == state.selected:
                    pygame.draw.rect(self.screen, SELECTION_COLOR, rect, width=3, border_radius=4)

        for button in self.buttons:
            button.draw(self.screen, self.font_small, button.contains(mouse_pos))

        panel_y = BOARD_ORIGIN[1] + BOARD_ROWS * (self.cell_size + GAP) + 10
        status_color = PIECE_COLORS[state.winner or state.current_player]
        status = self.font_medium.render(state.status_text, True, status_color)
        self.screen.blit(status, status.get_rect(centerx=self.screen.get_width() // 2, top=panel_y))

        if self.message:
            msg = self.font_small.render(self.message, True, TEXT_COLOR)
            self.screen.blit(msg, msg.get_rect(centerx=self.screen.get_width() // 2, top=panel_y + 36))

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(event.pos)

            self.draw()
            pygame.display.flip()
            self.clock.tick(FPS)

        LOG.info("Window closed")
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Samurai Tactics graphical client")
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    app = SamuraiTacticsApp(cell_size=max(32, args.cell_size))
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution
    sys.exit(main())
