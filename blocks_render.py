"""
Rendering helpers for the Blocks driver.

- Pre-render one cell Surface per style (solid + landing outline).
- Pre-render the static background (grid + panel frame) per board size.
- Cache HUD text surfaces; re-render only when values change.
Everything is drawn from an engine Snapshot; nothing here touches game state.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from blocks_engine import Snapshot
from blocks_hiscore import Table
from blocks_layout import Dims
from blocks_piece import PieceShape

# Colors per style id 1..29
COLORS: List[Tuple[int,int,int]] = [
    (0,0,0),
    (255,0,0), (0,255,0), (0,0,255), (255,255,0), (255,0,255),
    (0,255,255), (255,165,0), (128,0,128), (0,128,0), (128,0,0),
    (0,128,128), (128,128,128), (192,192,192), (255,182,193), (255,105,180),
    (255,20,147), (220,20,60), (178,34,34), (139,0,0), (255,99,71),
    (255,69,0), (255,140,0), (255,215,0), (173,255,47), (50,205,50),
    (144,238,144), (152,251,152), (240,230,140), (221,160,221),
]
FALLBACK = (102,102,102)
TEXT = (200,210,240)


def color(style: int):
    return COLORS[style] if 0 < style < len(COLORS) else FALLBACK


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None


class RenderAssets:
    """Holds pre-rendered assets for one board size."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.hud = HudCache()
        self._make_static()
        self._make_cells()

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.total_h - 2*d.margin)
        pygame.draw.rect(self.bg, (21,25,53), panel)
        pygame.draw.rect(self.bg, (50,60,100), panel, 1)
        self.pv_cell = 16
        self.pv_rect = pygame.Rect(d.panel_x + 12, d.panel_y + 130, self.pv_cell*7, self.pv_cell*5)
        pygame.draw.rect(self.bg, (15,18,40), self.pv_rect)
        pygame.draw.rect(self.bg, (55,65,110), self.pv_rect, 1)

    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.ghost_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for style in range(1, len(COLORS)):
            s = pygame.Surface((c-2, c-2))
            s.fill(color(style))
            self.cell_surf[style] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, color(style), (0,0,c-8,c-8), 2)
            self.ghost_surf[style] = g

    def _cell(self, style):
        return self.cell_surf.get(style) or self.cell_surf[1]

    def cell_pos(self, bx, by, inset=1):
        return (self.dims.board_x + bx*self.dims.cell + inset, self.dims.board_y + by*self.dims.cell + inset)

    def draw_shape(self, screen, shape: PieceShape, center: Tuple[int,int], size: int):
        cx, cy = center
        for dx, dy in shape.cells:
            r = pygame.Rect(cx + dx*size - size//2, cy + dy*size - size//2, size, size)
            pygame.draw.rect(screen, color(shape.style), r)
            pygame.draw.rect(screen, (255,255,255), r, 1)

    def draw(self, screen: pygame.Surface, snap: Snapshot, hiscores: Table):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(snap.rows):
            for x, v in enumerate(row):
                if v:
                    screen.blit(self._cell(v), self.cell_pos(x, y))
        if snap.piece is not None and not snap.game_over:
            px, py = snap.anchor
            for bx, by in snap.piece.at(px, snap.drop_y):
                if by >= 0:
                    screen.blit(self.ghost_surf.get(snap.piece.style, self.ghost_surf[1]), self.cell_pos(bx, by, 4))
            for bx, by in snap.piece.at(px, py):
                if by >= 0:
                    screen.blit(self._cell(snap.piece.style), self.cell_pos(bx, by))
        self.draw_panel(screen, snap, hiscores)

    def draw_panel(self, screen, snap: Snapshot, hiscores: Table):
        d = self.dims
        f = self.font
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        screen.blit(f.render(f"Blocks: {snap.mode.name}", True, (197,202,233)), (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 112))
        if snap.next_piece is not None:
            self.draw_shape(screen, snap.next_piece, self.pv_rect.center, self.pv_cell)
        y = self.pv_rect.bottom + 12
        screen.blit(f.render("High scores:", True, TEXT), (d.panel_x + 12, y)); y += 20
        for i, rec in enumerate(hiscores):
            txt = f"{i+1}. -----" if rec is None else f"{i+1}. {rec.score:,}  ({rec.lines})"
            screen.blit(f.render(txt, True, (165,175,215)), (d.panel_x + 12, y)); y += 20
        y += 8
        screen.blit(f.render(f"Pieces: {snap.total_pieces}", True, TEXT), (d.panel_x + 12, y)); y += 20
        used = sorted(snap.stats.items(), key=lambda kv: -kv[1])[:6]
        for idx, n in used:
            screen.blit(f.render(f"#{idx+1} ×{n}", True, (165,175,215)), (d.panel_x + 12, y)); y += 18
        if snap.message:
            self.banner(screen, snap.message, (255,235,120), -60)
        if snap.game_over:
            self.banner(screen, "GAME OVER (R to Restart)", (255,220,220))
        elif snap.paused:
            self.banner(screen, "PAUSED (W/Esc to Resume)", (220,240,255))

    def banner(self, screen, text, col, dy=0):
        d = self.dims
        msg = self.font.render(text, True, col)
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2 + dy)))
