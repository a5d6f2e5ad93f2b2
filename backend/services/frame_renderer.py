"""
Frame Renderer for Snake game snapshots

Turns a GameState into an in-memory PIL (Pillow) image:
- Black board with faint grid lines
- Food as a red cell
- Snake head bright green, body darker green
- HUD strip above the board with the score and the game-over message

Nothing is written to disk; callers decide what to do with the image.
FrameRecorder keeps the frames of a running game in memory and can be
handed to a TickScheduler as its on_tick callback.
"""

from collections import deque
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.game_state import GameState, GAME_OVER_MESSAGE


DEFAULT_CELL_SIZE = 20
HUD_HEIGHT = 24


class ColorScheme:
    """Colors of the classic desktop game"""

    BACKGROUND = "#000000"
    GRID_LINE = "#282828"
    FOOD = "#FF0000"
    SNAKE_HEAD = "#00FF00"
    SNAKE_BODY = "#00B200"
    HUD_BACKGROUND = "#101010"
    HUD_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class FrameRenderer:
    """Render GameState snapshots to Pillow images"""

    def __init__(self, cell_size: int = DEFAULT_CELL_SIZE):
        if cell_size < 3:
            raise ValueError(f"cell_size must be at least 3 pixels, got {cell_size}")
        self.cell_size = cell_size
        self.font = ImageFont.load_default()

    def frame_size(self, state: GameState) -> Tuple[int, int]:
        return (state.width * self.cell_size, state.height * self.cell_size + HUD_HEIGHT)

    def cell_origin(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        """Top-left pixel of a board cell inside the frame."""
        x, y = cell
        return (x * self.cell_size, HUD_HEIGHT + y * self.cell_size)

    def render(self, state: GameState) -> Image.Image:
        """Draw one frame for the given snapshot."""
        img = Image.new('RGB', self.frame_size(state), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_grid(draw, state)

        if state.food is not None:
            self._draw_cell(draw, state.food, hex_to_rgb(ColorScheme.FOOD))

        # Body first, head last so it stays visible
        for cell in state.snake[1:]:
            if state.in_bounds(cell):
                self._draw_cell(draw, cell, hex_to_rgb(ColorScheme.SNAKE_BODY))
        if state.snake and state.in_bounds(state.head):
            self._draw_cell(draw, state.head, hex_to_rgb(ColorScheme.SNAKE_HEAD))

        self._draw_hud(draw, img.width, state)
        return img

    def _draw_grid(self, draw: ImageDraw.ImageDraw, state: GameState):
        board_w = state.width * self.cell_size
        board_h = state.height * self.cell_size
        color = hex_to_rgb(ColorScheme.GRID_LINE)

        for i in range(state.width + 1):
            x = i * self.cell_size
            draw.line([x, HUD_HEIGHT, x, HUD_HEIGHT + board_h], fill=color, width=1)

        for i in range(state.height + 1):
            y = HUD_HEIGHT + i * self.cell_size
            draw.line([0, y, board_w, y], fill=color, width=1)

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        cell: Tuple[int, int],
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single cell (for snake segments or food)"""
        x, y = self.cell_origin(cell)
        size = self.cell_size
        draw.rectangle(
            [x + padding, y + padding, x + size - 1 - padding, y + size - 1 - padding],
            fill=color
        )

    def _draw_hud(self, draw: ImageDraw.ImageDraw, width: int, state: GameState):
        draw.rectangle([0, 0, width - 1, HUD_HEIGHT - 1], fill=hex_to_rgb(ColorScheme.HUD_BACKGROUND))
        draw.text((6, 6), f"Score: {state.score}", fill=hex_to_rgb(ColorScheme.HUD_TEXT), font=self.font)

        if not state.running:
            bbox = draw.textbbox((0, 0), GAME_OVER_MESSAGE, font=self.font)
            text_width = bbox[2] - bbox[0]
            draw.text(
                (max(6, width - text_width - 6), 6),
                GAME_OVER_MESSAGE,
                fill=hex_to_rgb(ColorScheme.HUD_TEXT),
                font=self.font
            )


class FrameRecorder:
    """Render every snapshot it is called with and keep the most recent frames."""

    def __init__(self, renderer: FrameRenderer, max_frames: Optional[int] = None):
        if max_frames is not None and max_frames <= 0:
            raise ValueError(f"max_frames must be positive, got {max_frames}")
        self.renderer = renderer
        self.frames = deque(maxlen=max_frames)
        self.rendered = 0

    def __call__(self, state: GameState) -> None:
        self.frames.append(self.renderer.render(state))
        self.rendered += 1

    @property
    def last_frame(self) -> Optional[Image.Image]:
        return self.frames[-1] if self.frames else None
