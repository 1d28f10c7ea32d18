import logging
import sys

import pygame

from blocks_config import CONFIG, GameConfig
from blocks_engine import GameEngine, Intent
from blocks_hiscore import HighScoreStore, clear
from blocks_input import Cooldown, ShiftRepeat
from blocks_layout import compute_dims
from blocks_overlay import Overlay
from blocks_render import RenderAssets

log = logging.getLogger("blocks")

KEYDOWN_INTENTS = {
    pygame.K_w: Intent.PAUSE,
    pygame.K_p: Intent.PAUSE,
    pygame.K_r: Intent.NEW_GAME,
    pygame.K_SPACE: Intent.HARD_DROP,
    pygame.K_s: Intent.SOFT_DROP_ON,
    pygame.K_DOWN: Intent.SOFT_DROP_ON,
}
ROTATE_KEYS = {
    pygame.K_j: Intent.ROTATE_CCW,
    pygame.K_z: Intent.ROTATE_CCW,
    pygame.K_k: Intent.ROTATE_180,
    pygame.K_l: Intent.ROTATE_CW,
    pygame.K_UP: Intent.ROTATE_CW,
}


def open_window(dims):
    """(Re)open the display sized for dims; called again whenever the board or cell size changes."""
    screen = pygame.display.set_mode((dims.total_w, dims.total_h), pygame.DOUBLEBUF, vsync=1)
    pygame.display.set_caption(f"Blocks {dims.cols}x{dims.rows}")
    return screen


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])
    font = pygame.font.SysFont(None, 22)
    clock = pygame.time.Clock()

    store = HighScoreStore(CONFIG["HISCORE_PATH"])
    engine = GameEngine(GameConfig.from_settings(CONFIG), high_scores=store.load())

    dims = screen = render = None

    def refresh_assets():
        nonlocal dims, screen, render
        new_dims = compute_dims(engine.board.width, engine.board.height)
        if new_dims != dims:
            dims = new_dims
            screen = open_window(dims)
            render = RenderAssets(dims, font)

    refresh_assets()
    shift = ShiftRepeat()
    rotate = Cooldown()
    overlay = Overlay()

    while True:
        dt = clock.tick(60)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_F1 or overlay.active:
                    changed = overlay.handle(e) if overlay.active else overlay.toggle()
                    if changed == "MODE":
                        engine.set_mode(CONFIG["MODE"])
                    elif changed == "BOARD_SIZE":
                        engine.set_board_size(CONFIG["BOARD_SIZE"])
                    elif changed == "SLIDE_PRESET":
                        engine.set_slide_preset(CONFIG["SLIDE_PRESET"])
                    elif changed == "CELL_SIZE":
                        refresh_assets()
                    continue
                if e.key == pygame.K_F2:
                    clear(engine.high_scores)
                    store.reset()
                elif e.key == pygame.K_ESCAPE:
                    engine.post(Intent.PAUSE)
                elif e.key in KEYDOWN_INTENTS:
                    engine.post(KEYDOWN_INTENTS[e.key])
                elif e.key in ROTATE_KEYS and rotate.ready():
                    engine.post(ROTATE_KEYS[e.key])
            if e.type == pygame.KEYUP and e.key in (pygame.K_s, pygame.K_DOWN):
                engine.post(Intent.SOFT_DROP_OFF)

        if not overlay.active:
            keys = pygame.key.get_pressed()
            step = shift.update(dt, keys[pygame.K_a] or keys[pygame.K_LEFT], keys[pygame.K_d] or keys[pygame.K_RIGHT])
            if step:
                engine.post(Intent.LEFT if step < 0 else Intent.RIGHT)
            rotate.update(dt)
            engine.tick(dt)

        for ev in engine.drain_events():
            if ev.kind == "new_game":
                refresh_assets()
            elif ev.kind == "high_score":
                store.save(engine.high_scores)
            elif ev.kind == "level":
                log.info("level %d, drop interval %d ms", ev.data["level"], ev.data["interval"])

        render.draw(screen, engine.snapshot(), engine.high_scores)
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
