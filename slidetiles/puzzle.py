"""The sliding tile board: shuffling, moving tiles and drawing."""

from __future__ import annotations

import logging
import random
from typing import Protocol

import pygame

from .constants import BLANK, BORDER, TILE_COUNT, TILE_SIZE, WHITE
from .utils import col_row, hex_color, index_of

logger = logging.getLogger(__name__)

SHUFFLE_MOVES = 1000
FONT_SIZE = 40
_CELLS = TILE_COUNT * TILE_COUNT


class _Video(Protocol):
    def update(self) -> None: ...

    def draw(self, surface: pygame.Surface, index: int, x: int, y: int) -> None: ...


class _Random(Protocol):
    def randrange(self, stop: int) -> int: ...


def tile_colors() -> list[tuple[int, int, int, int]]:
    """Return the hint colour of every tile, keyed by the tile's target index."""
    hint_colors = [
        BLANK,
        hex_color("#fae4d0", 150),
        hex_color("#b7fce5", 150),
        hex_color("#b8e2fc", 150),
        hex_color("#d5d6fa", 150),
    ]
    colors = [BLANK] * _CELLS
    for k in range(1, TILE_COUNT):
        for i in range(k - 1, TILE_COUNT):
            colors[index_of(k - 1, i)] = hint_colors[k]
            colors[index_of(i, k - 1)] = hint_colors[k]
    colors[-1] = BLANK
    return colors


def _trunc_div(value: float, divisor: int) -> int:
    """Integer division rounding toward zero, as pixel positions are handled."""
    whole = int(value)
    quotient = abs(whole) // divisor
    return quotient if whole >= 0 else -quotient


class Puzzle:
    """A square board of numbered tiles with one empty cell, marked by 0."""

    def __init__(self, video: _Video | None = None, rng: _Random | None = None) -> None:
        self._board = [*range(1, _CELLS), 0]
        self._empty_index = _CELLS - 1
        self._colors = tile_colors()
        self._rng = rng if rng is not None else random.Random()
        self.video = video
        self.show_hint = False
        self.show_hint_color = True
        self._font: pygame.font.Font | None = None
        self.shuffle()

    @property
    def board(self) -> tuple[int, ...]:
        return tuple(self._board)

    @property
    def empty_index(self) -> int:
        return self._empty_index

    def _swap(self, a: int, b: int) -> None:
        self._board[a], self._board[b] = self._board[b], self._board[a]

    def shuffle(self) -> None:
        """Shuffle by making random legal moves, so the board stays solvable."""
        self._empty_index = self._board.index(0)
        for _ in range(SHUFFLE_MOVES):
            empty_x, empty_y = col_row(self._empty_index)
            moves = []
            if empty_y > 0:
                moves.append(self._empty_index - TILE_COUNT)
            if empty_y < TILE_COUNT - 1:
                moves.append(self._empty_index + TILE_COUNT)
            if empty_x > 0:
                moves.append(self._empty_index - 1)
            if empty_x < TILE_COUNT - 1:
                moves.append(self._empty_index + 1)
            target = moves[self._rng.randrange(len(moves))]
            self._swap(self._empty_index, target)
            self._empty_index = target

    def is_solved(self) -> bool:
        """Return True when tiles read 1, 2, ... in order with the gap last."""
        return self._board[:-1] == list(range(1, _CELLS)) and self._board[-1] == 0

    def move_tile(self, mouse_x: float, mouse_y: float) -> None:
        """Slide the tiles between the gap and the clicked cell toward the gap."""
        clicked = _trunc_div(mouse_y, TILE_SIZE) * TILE_COUNT + _trunc_div(mouse_x, TILE_SIZE)
        if not 0 <= clicked < _CELLS:
            return

        empty_x, empty_y = col_row(self._empty_index)
        click_x, click_y = col_row(clicked)
        logger.debug("mouse click at %d (%d, %d)", self._board[clicked], click_x + 1, click_y + 1)
        logger.debug("empty pos (%d, %d)", empty_x + 1, empty_y + 1)

        if empty_y == click_y:
            step = 1 if click_x > empty_x else -1
            for x in range(empty_x + step, click_x + step, step):
                self._swap(index_of(x, click_y), index_of(x - step, click_y))
            self._empty_index = clicked
        elif empty_x == click_x:
            step = 1 if click_y > empty_y else -1
            for y in range(empty_y + step, click_y + step, step):
                self._swap(index_of(click_x, y), index_of(click_x, y - step))
            self._empty_index = clicked

    def update(self, hint_held: bool = False, toggle_color_pressed: bool = False) -> None:
        """Advance the video and apply the hint keys for this frame."""
        if self.video is not None:
            self.video.update()
        self.show_hint = bool(hint_held)
        if toggle_color_pressed:
            self.show_hint_color = not self.show_hint_color

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every non-empty tile onto ``surface``."""
        side = TILE_SIZE - BORDER
        for i, value in enumerate(self._board):
            if value == 0:
                continue
            col, row = col_row(i)
            x, y = col * TILE_SIZE, row * TILE_SIZE

            if self.video is not None:
                self.video.draw(surface, value, x, y)

            if self.show_hint:
                color = self._colors[value - 1] if self.show_hint_color else hex_color("#f5f5f5", 150)
                overlay = pygame.Surface((side, side), pygame.SRCALPHA)
                overlay.fill(color)
                surface.blit(overlay, (x, y))

                font = self._get_font()
                label = font.render(str(value), True, WHITE[:3])
                text_width = label.get_width()
                surface.blit(
                    label,
                    (x + (TILE_SIZE - text_width) // 2, y + (TILE_SIZE - FONT_SIZE) // 2),
                )