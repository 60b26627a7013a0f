from __future__ import annotations

import logging
from typing import Optional

import pygame

from tetrus.game import Event, EventLog, Move, Score, TetrisGame
from .renderer import Renderer


logger = logging.getLogger(__name__)

USER_MOVE_DEBOUNCE = 0.1  # seconds
GAME_OVER_HOLD = 3.0  # seconds the game over screen stays up
FPS = 60


def _poll_events() -> tuple[bool, Optional[Move]]:
    """Returns (quit requested, move from a released key)."""
    quit_requested = False
    move: Optional[Move] = None
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_q, pygame.K_ESCAPE):
            quit_requested = True
        elif event.type == pygame.KEYUP and move is None:
            move = Move.from_key(pygame.key.name(event.key))
    return quit_requested, move


def run(game: TetrisGame, speedup: int = 1) -> Score:
    """Play one game in a window and return its score.

    Bot games ignore the keyboard apart from quitting. Gravity follows the
    level's drop delay; both clocks run ``speedup`` times faster.
    """
    pygame.init()
    try:
        renderer = Renderer()
        screen = pygame.display.set_mode(renderer.window_size(game.grid.grid.shape))
        pygame.display.set_caption("Tetrus")
        clock = pygame.time.Clock()
        event_log = EventLog()

        while True:
            quit_requested, key_move = _poll_events()
            if quit_requested:
                logger.info("Window closed after %d pieces", game.pieces_placed)
                break

            if event_log.did_happen(Event.GAME_OVER):
                renderer.draw(screen, game.get_state(), game.score)
                renderer.draw_game_over(screen)
                pygame.display.flip()
                if event_log.elapsed_since(Event.GAME_OVER, GAME_OVER_HOLD):
                    break
                clock.tick(FPS)
                continue

            if event_log.elapsed_since(Event.USER_MOVE, USER_MOVE_DEBOUNCE / speedup):
                move = game.next_move() if game.bot is not None else key_move
                if move is not None:
                    game.apply_move(move)
                    event_log.register_event(Event.USER_MOVE)

            if event_log.elapsed_since(Event.GRAVITY_DROP, game.score.block_drop_delay() / speedup):
                game.drop_one()
                event_log.register_event(Event.GRAVITY_DROP)

            if game.game_over:
                event_log.register_event(Event.GAME_OVER)

            renderer.draw(screen, game.get_state(), game.score)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return game.score
