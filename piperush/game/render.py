# piperush/game/render.py
from __future__ import annotations
import pygame

from .config import (
    COLOR_DAY, COLOR_NIGHT, COLOR_FG, COLOR_PLAYER, COLOR_PIPE, COLOR_PIPE_EDGE,
    COLOR_DANGER, COLOR_PANEL, PIPE_HEIGHT, DEBUG_OVERLAY
)
from .simulation import GameSnapshot


def draw_world(surf: pygame.Surface, snap: GameSnapshot, pipe_height: float = PIPE_HEIGHT):
    """Background, pipe rows and player. No text."""
    width = surf.get_width()
    surf.fill(COLOR_DAY if snap.is_day else COLOR_NIGHT)

    for row in snap.rows:
        y = int(row.y)
        left = pygame.Rect(0, y, int(row.left_gap_start), int(pipe_height))
        right = pygame.Rect(int(row.right_gap_end), y,
                            width - int(row.right_gap_end), int(pipe_height))
        for r in (left, right):
            if r.width > 0:
                pygame.draw.rect(surf, COLOR_PIPE, r)
                pygame.draw.rect(surf, COLOR_PIPE_EDGE, r, width=2)

    player = pygame.Rect(int(snap.player_x), int(snap.player_y),
                         int(snap.player_w), int(snap.player_h))
    pygame.draw.rect(surf, COLOR_DANGER if snap.game_over else COLOR_PLAYER,
                     player, border_radius=8)


def draw_hud(surf: pygame.Surface, snap: GameSnapshot, font: pygame.font.Font):
    lines = [
        f"Score: {snap.score}",
        f"High Score: {snap.high_score}",
        f"Level: {snap.level}",
    ]
    for i, msg in enumerate(lines):
        surf.blit(font.render(msg, True, COLOR_FG), (10, 8 + i * 20))

    if DEBUG_OVERLAY:
        for row in snap.rows:
            txt = f"#{row.row_id} [{row.left_gap_start:.0f},{row.right_gap_end:.0f}]"
            surf.blit(font.render(txt, True, COLOR_FG), (row.left_gap_start + 4, int(row.y)))


def draw_game_over(surf: pygame.Surface, snap: GameSnapshot, font: pygame.font.Font):
    w, h = surf.get_size()
    panel = pygame.Surface((w, 70), pygame.SRCALPHA)
    panel.fill(COLOR_PANEL)
    surf.blit(panel, (0, h // 2 - 24))

    msg = font.render("Game Over! Press SPACE to Restart", True, COLOR_FG)
    surf.blit(msg, (w // 2 - msg.get_width() // 2, h // 2 - 12))
    final = font.render(f"Final Score: {snap.score}", True, COLOR_FG)
    surf.blit(final, (w // 2 - final.get_width() // 2, h // 2 + 12))


def draw_frame(surf: pygame.Surface, snap: GameSnapshot, font: pygame.font.Font,
               pipe_height: float = PIPE_HEIGHT):
    draw_world(surf, snap, pipe_height)
    draw_hud(surf, snap, font)
    if snap.game_over:
        draw_game_over(surf, snap, font)
