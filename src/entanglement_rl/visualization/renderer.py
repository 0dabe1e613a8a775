from __future__ import annotations

import math
from typing import List, Tuple

import pygame

from entanglement_rl.game import Board, EntanglementGame, RenderTag, Tile
from entanglement_rl.game.path import EDGE_OFFSETS, Coordinate
from entanglement_rl.game.pieces import PATH_COLOR, PINS_PER_EDGE, TAG_COLORS


Point = Tuple[float, float]

SQRT3 = math.sqrt(3.0)

LINK_COLOR = (200, 200, 210)
NEXT_COLOR = (120, 220, 140)


def _color_for_tag(tag: RenderTag) -> Tuple[int, int, int]:
    return TAG_COLORS.get(tag, (200, 200, 200))


def _bend(center: Point, a: Point, b: Point) -> Point:
    # Pull the link towards the tile center so it curves through the hex
    return (center[0] * 2 + a[0] + b[0]) / 4, (center[1] * 2 + a[1] + b[1]) / 4


class Renderer:
    """Draws the board as pointy-top hexagons.

    Grid offsets map to pixels as x ~ col - row / 2, y ~ 1.5 * row, which
    puts the six neighbours of the direction table around each cell.
    """

    def __init__(self, hex_size: int = 26, margin: int = 20) -> None:
        self.hex_size = hex_size
        self.margin = margin

    def board_pixel_size(self, board: Board) -> Tuple[int, int]:
        s = self.hex_size
        width = SQRT3 * s * board.size + 2 * self.margin
        height = s * (1.5 * (board.size - 1) + 2) + 2 * self.margin
        return int(math.ceil(width)), int(math.ceil(height))

    def cell_center(self, board: Board, coord: Coordinate) -> Point:
        row, col = coord
        s = self.hex_size
        x = self.margin + SQRT3 * s * (col - row / 2 + board.radius / 2 + 0.5)
        y = self.margin + s + 1.5 * s * row
        return x, y

    def hex_corners(self, center: Point, size: float) -> List[Point]:
        cx, cy = center
        return [
            (cx + size * math.cos(math.radians(30 + 60 * k)), cy + size * math.sin(math.radians(30 + 60 * k)))
            for k in range(6)
        ]

    def pin_point(self, center: Point, size: float, pin: int) -> Point:
        # Edge normal from the direction table, pins run clockwise along it
        dr, dc = EDGE_OFFSETS[pin // PINS_PER_EDGE]
        nx, ny = SQRT3 * (dc - dr / 2), 1.5 * dr
        norm = math.hypot(nx, ny)
        nx, ny = nx / norm, ny / norm
        tx, ty = -ny, nx
        along = -0.25 if pin % PINS_PER_EDGE == 0 else 0.25
        apothem = size * SQRT3 / 2
        return (
            center[0] + nx * apothem + tx * along * size,
            center[1] + ny * apothem + ty * along * size,
        )

    def draw_tile(self, surf: pygame.Surface, tile: Tile, center: Point, size: float) -> None:
        pygame.draw.polygon(surf, _color_for_tag(tile.render_tag), self.hex_corners(center, size - 1))
        if tile.render_tag != RenderTag.OCCUPIED:
            return
        for a, b in tile.connections:
            pa = self.pin_point(center, size, a)
            pb = self.pin_point(center, size, b)
            pygame.draw.lines(surf, LINK_COLOR, False, [pa, _bend(center, pa, pb), pb], 1)

    def board_surface(self, board: Board) -> pygame.Surface:
        surf = pygame.Surface(self.board_pixel_size(board))
        surf.fill((10, 10, 14))
        s = self.hex_size
        for row in range(board.size):
            for col in range(board.size):
                tile = board.tile_at((row, col))
                if tile.render_tag == RenderTag.PLACEHOLDER:
                    continue
                self.draw_tile(surf, tile, self.cell_center(board, (row, col)), s)
        for item in board.path.items[1:]:
            center = self.cell_center(board, item.coord)
            entry = self.pin_point(center, s, item.entry)
            exit_ = self.pin_point(center, s, item.exit)
            pygame.draw.lines(surf, PATH_COLOR, False, [entry, _bend(center, entry, exit_), exit_], 3)
        if not board.finished:
            corners = self.hex_corners(self.cell_center(board, board.next_place), s - 2)
            pygame.draw.polygon(surf, NEXT_COLOR, corners, 2)
        return surf

    def draw(self, screen: pygame.Surface, game: EntanglementGame) -> None:
        board_surf = self.board_surface(game.board)
        screen.fill((10, 10, 14))
        screen.blit(board_surf, (0, 0))
        # Upcoming and pocket tiles beside the board
        x0 = board_surf.get_width() + self.margin + self.hex_size
        for i, tile in enumerate((game.upcoming, game.pocket)):
            center = (x0, self.margin + self.hex_size * (1.5 + 3 * i))
            self.draw_tile(screen, tile, center, self.hex_size)
