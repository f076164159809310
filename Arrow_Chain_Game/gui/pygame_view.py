"""Pygame-based board renderer and input helper."""

import time

try:
    from Board import DELTAS, Direction
    from engine.commands import QUIT, Command
except ImportError:
    from Arrow_Chain_Game.Board import DELTAS, Direction
    from Arrow_Chain_Game.engine.commands import QUIT, Command


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_CELL = (255, 255, 255)
    COLOR_LEGAL = (255, 192, 203)
    COLOR_GRID = (60, 40, 20)
    COLOR_ARROW = (20, 20, 20)
    COLOR_ACTIVE = (200, 0, 0)
    COLOR_TEXT = (230, 230, 230)

    PANEL_HEIGHT = 60
    SELECTOR_HEIGHT = 70

    def __init__(self, board_size=5, window_size=500):
        import pygame

        self.board_size = board_size
        self.window_size = window_size
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size + self.PANEL_HEIGHT + self.SELECTOR_HEIGHT))
        pygame.display.set_caption("Arrow Chain")

        self.font_medium = pygame.font.Font(None, 32)

        self.tile_size = window_size / board_size
        self.board_origin = (0, self.PANEL_HEIGHT)
        self.selector_origin = (0, self.PANEL_HEIGHT + window_size)
        # Selector order matches the direction cycle: up, right, down, left.
        self.selector_width = window_size / 4

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_arrow(self, rect, direction, color):
        """Triangle-headed arrow inside rect, pointing along direction."""
        dx, dy = DELTAS[direction]
        cx, cy = rect.center
        half = rect.width * 0.32
        # Perpendicular axis for the arrow head width.
        px, py = -dy, dx
        tip = (cx + dx * half, cy + dy * half)
        tail = (cx - dx * half, cy - dy * half)
        head_base = (cx + dx * half * 0.1, cy + dy * half * 0.1)
        wing = half * 0.55
        self._pygame.draw.line(self.screen, color, tail, head_base, max(2, int(rect.width * 0.08)))
        self._pygame.draw.polygon(
            self.screen,
            color,
            [tip, (head_base[0] + px * wing, head_base[1] + py * wing), (head_base[0] - px * wing, head_base[1] - py * wing)],
        )

    def _cell_rect(self, x, y):
        ox, oy = self.board_origin
        return self._pygame.Rect(ox + x * self.tile_size, oy + y * self.tile_size, self.tile_size, self.tile_size)

    def _draw_cells(self, state):
        legal = {cell.pos for cell in state.legal_targets}
        for cell in state.grid.cells():
            rect = self._cell_rect(cell.x, cell.y)
            fill = self.COLOR_LEGAL if cell.pos in legal else self.COLOR_CELL
            self._pygame.draw.rect(self.screen, fill, rect)
            self._pygame.draw.rect(self.screen, self.COLOR_GRID, rect, 1)
            if not cell.is_empty():
                self._draw_arrow(rect, cell.direction, self.COLOR_ARROW)
        if state.active_cell is not None:
            rect = self._cell_rect(*state.active_cell.pos)
            self._pygame.draw.rect(self.screen, self.COLOR_ACTIVE, rect, 3)

    def _draw_info_panel(self, state):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)
        counts = "  ".join(f"{d.name[0]}:{state.counts[d]}" for d in DELTAS)
        status = "chain running" if state.in_progress else f"{len(state.history)} moves"
        self._draw_text(f"{counts}   {status}", self.font_medium, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT / 2))

    def _selector_rect(self, index):
        ox, oy = self.selector_origin
        return self._pygame.Rect(ox + index * self.selector_width, oy, self.selector_width, self.SELECTOR_HEIGHT)

    def _draw_selector(self, selected):
        for direction in DELTAS:
            rect = self._selector_rect(int(direction))
            fill = self.COLOR_LEGAL if direction == selected else self.COLOR_CELL
            self._pygame.draw.rect(self.screen, fill, rect)
            self._pygame.draw.rect(self.screen, self.COLOR_GRID, rect, 1)
            self._draw_arrow(rect.inflate(-rect.width * 0.3, -rect.height * 0.1), direction, self.COLOR_ARROW)

    def render(self, state):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_info_panel(state)
        self._draw_cells(state)
        self._draw_selector(state.selected)
        self._pygame.display.flip()

    def _action_from_click(self, pos):
        mx, my = pos
        ox, oy = self.board_origin
        if oy <= my < oy + self.window_size and 0 <= mx < self.window_size:
            x = int((mx - ox) // self.tile_size)
            y = int((my - oy) // self.tile_size)
            if 0 <= x < self.board_size and 0 <= y < self.board_size:
                return Command("PLACE", (x, y, None))
            return None
        sx, sy = self.selector_origin
        if sy <= my < sy + self.SELECTOR_HEIGHT and 0 <= mx < self.window_size:
            return Command("SELECT", (Direction(int((mx - sx) // self.selector_width)),))
        return None

    def _action_from_key(self, key):
        pygame = self._pygame
        keymap = {
            pygame.K_UP: Command("SELECT", (Direction.UP,)),
            pygame.K_RIGHT: Command("SELECT", (Direction.RIGHT,)),
            pygame.K_DOWN: Command("SELECT", (Direction.DOWN,)),
            pygame.K_LEFT: Command("SELECT", (Direction.LEFT,)),
            pygame.K_u: Command("UNDO", ()),
            pygame.K_r: Command("RESET", ()),
            pygame.K_ESCAPE: QUIT,
        }
        return keymap.get(key)

    def wait_for_action(self, game, deadline):
        """Poll window events until one maps to an action or the deadline passes."""
        pygame = self._pygame
        while time.time() < deadline:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return QUIT
                if event.type == pygame.MOUSEBUTTONDOWN:
                    action = self._action_from_click(event.pos)
                    if action:
                        return action
                if event.type == pygame.KEYDOWN:
                    action = self._action_from_key(event.key)
                    if action:
                        return action
            pygame.time.delay(5)
        return None

    def close(self):
        self._pygame.quit()
