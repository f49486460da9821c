
"""
pygame renderer for the simulation core.

- Static background (grid, panel, preview frame) is pre-rendered once.
- Cell sprites are cached per style; styles are opaque RGB data from the blocks.
- HUD text surfaces are re-rendered only when the values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Sequence
from tetris_block import Block, Style
from tetris_layout import Dims, columns, rows, cell_width, cell_height
from tetris_state import State


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    high_score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class Renderer:
    """Draws snapshots; never touches the State it is given."""
    def __init__(self, screen: pygame.Surface, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.screen = screen
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.hud = HudCache()
        self.cell_surf: Dict[Style, pygame.Surface] = {}
        self._make_static()

    # ---------- Static background ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        cw, ch = cell_width(), cell_height()
        for x in range(columns()+1):
            X = d.board_x + x*cw
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(rows()+1):
            Y = d.board_y + y*ch
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        frame = pygame.Rect(d.preview_x, d.preview_y, d.preview_w, d.preview_h)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _cell(self, style: Style) -> pygame.Surface:
        s = self.cell_surf.get(style)
        if s is None:
            s = pygame.Surface((cell_width()-2, cell_height()-2))
            s.fill(style)
            self.cell_surf[style] = s
        return s

    # ---------- Blocks + preview ----------
    def draw(self, state: State, preview: Sequence[Block]):
        d = self.dims
        self.screen.blit(self.bg, (0,0))
        for b in state.blocks:
            if b.y < 0:
                continue
            self.screen.blit(self._cell(b.style), (d.board_x + b.x + 1, d.board_y + b.y + 1))
        if preview:
            # centre the piece in the preview box
            min_x = min(b.x for b in preview); max_x = max(b.x + b.width for b in preview)
            min_y = min(b.y for b in preview); max_y = max(b.y + b.height for b in preview)
            ox = d.preview_x + (d.preview_w - (max_x - min_x)) // 2 - min_x
            oy = d.preview_y + (d.preview_h - (max_y - min_y)) // 2 - min_y
            for b in preview:
                self.screen.blit(self._cell(b.style), (ox + b.x + 1, oy + b.y + 1))

    # ---------- HUD ----------
    def update_text(self, state: State):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Bedrock Tetris", True, (197,202,233))
        if state.score != self.hud.score:
            self.hud.score = state.score
            self.hud.score_s = f.render(f"Score: {state.score}", True, (200,210,240))
        if state.level != self.hud.level:
            self.hud.level = state.level
            self.hud.level_s = f.render(f"Level: {state.level}", True, (200,210,240))
        if state.high_score != self.hud.high_score:
            self.hud.high_score = state.high_score
            self.hud.high_s = f.render(f"High: {state.high_score}", True, (200,210,240))
        self.screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        if self.hud.score_s: self.screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        if self.hud.level_s: self.screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        if self.hud.high_s: self.screen.blit(self.hud.high_s, (d.panel_x + 12, d.panel_y + 92))
        nl = f.render("Next:", True, (200,210,240))
        self.screen.blit(nl, (d.panel_x + 12, d.panel_y + 126))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("A/D ←/→ Move", True, (165,175,215)),
                f.render("S ↓ Soft drop", True, (165,175,215)),
                f.render("W ↑ Rotate", True, (165,175,215)),
                f.render("R Restart", True, (165,175,215)),
            ]
        y = d.preview_y + d.preview_h + 24
        for surf in self.hud.controls:
            self.screen.blit(surf, (d.panel_x + 12, y)); y += 20

    # ---------- Game over ----------
    def show_game_over(self, visible: bool):
        if not visible:
            return
        d = self.dims
        msg = self.big_font.render("GAME OVER", True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        self.screen.blit(msg, rect)
        hint = self.font.render("R to Restart", True, (255,220,220))
        self.screen.blit(hint, hint.get_rect(center=(rect.centerx, rect.bottom + 16)))
