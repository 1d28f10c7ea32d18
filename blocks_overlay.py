import pygame
from blocks_config import BOARD_SIZES, CONFIG, SLIDE_PRESETS
from blocks_piece import Mode


class Overlay:
    """Settings panel (F1). Numeric items step between bounds, the rest cycle through choices."""
    def __init__(self, settings=CONFIG):
        self.settings = settings
        self.active = False
        self.items = [
            ("MODE", "Mode", [m.name for m in Mode]),
            ("BOARD_SIZE", "Board", list(BOARD_SIZES)),
            ("SLIDE_PRESET", "Slide", list(SLIDE_PRESETS)),
            ("CELL_SIZE", "Cell size", (16, 40, 2)),
            ("REPEAT_DELAY_MS", "Repeat delay", (0, 400, 10)),
            ("REPEAT_MS", "Repeat rate", (0, 200, 5)),
            ("ROTATE_COOLDOWN_MS", "Rotate cooldown", (0, 400, 10)),
        ]
        self.index = 0

    def toggle(self): self.active = not self.active

    def handle(self, e):
        """Apply one key press; returns the settings key that changed, if any."""
        if e.key in (pygame.K_ESCAPE, pygame.K_F1): self.toggle(); return None
        if e.key == pygame.K_UP: self.index = (self.index-1) % len(self.items); return None
        if e.key == pygame.K_DOWN: self.index = (self.index+1) % len(self.items); return None
        key, label, opts = self.items[self.index]
        val = self.settings[key]
        step = {pygame.K_LEFT: -1, pygame.K_RIGHT: 1, pygame.K_RETURN: 1}.get(e.key)
        if step is None: return None
        if isinstance(opts, list):
            i = opts.index(val) if val in opts else 0
            self.settings[key] = opts[(i + step) % len(opts)]
        else:
            lo, hi, inc = opts
            self.settings[key] = max(lo, min(hi, val + step*inc))
        return key if self.settings[key] != val else None

    def draw(self, screen, font, w, h):
        if not self.active: return
        s = pygame.Surface((w-80, h-80), pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s, (40,40))
        screen.blit(font.render("SETTINGS (F1/Esc to close)", True, (230,240,255)), (60,56))
        screen.blit(font.render("↑/↓ select • ←/→ change", True, (200,210,235)), (60,80))
        y = 120
        for i, (key, label, _) in enumerate(self.items):
            col = (255,255,255) if i == self.index else (200,210,235)
            screen.blit(font.render(f"{label}: {self.settings[key]}", True, col), (60,y)); y += 28
