"""A 2D camera mapping between window pixels and world coordinates."""

from __future__ import annotations

KEY_ZOOM_FACTOR = 1.1
MOUSE_WHEEL_ZOOM_FACTOR = 1.1
PAN_SPEED_FACTOR = 0.05
INITIAL_DEFAULT_ZOOM_OUT = 1.4


class Camera:
    """A view onto a square world: a centre, a visible size and a window viewport.

    The viewport is stored as fractions of the window ``(left, top, width, height)``.
    """

    def __init__(
        self,
        world_size: float,
        initial_zoom: float = INITIAL_DEFAULT_ZOOM_OUT,
        window_width: int = 1920,
        window_height: int = 1080,
    ) -> None:
        if world_size <= 0:
            raise ValueError(f"world_size must be positive, got {world_size}")
        if initial_zoom <= 0:
            raise ValueError(f"initial_zoom must be positive, got {initial_zoom}")
        if window_width <= 0 or window_height <= 0:
            raise ValueError("window dimensions must be positive")
        self.world_size = float(world_size)
        self.initial_zoom = float(initial_zoom)
        self.window_width = int(window_width)
        self.window_height = int(window_height)
        self.viewport: tuple[float, float, float, float] = (0.0, 0.0, 1.0, 1.0)
        self.center: tuple[float, float] = (0.0, 0.0)
        self.size: tuple[float, float] = (0.0, 0.0)
        self.reset()

    def reset(self) -> None:
        """Show the whole world, centred, at the initial zoom."""
        half = self.world_size / 2.0
        self.center = (half, half)
        self.size = (self.world_size, self.world_size)
        self.zoom(self.initial_zoom)

    def zoom(self, factor: float) -> None:
        """Scale the visible area; factors above 1 zoom out."""
        if factor <= 0:
            raise ValueError(f"zoom factor must be positive, got {factor}")
        width, height = self.size
        self.size = (width * factor, height * factor)

    def move(self, dx: float, dy: float) -> None:
        """Shift the centre by a world-space offset."""
        cx, cy = self.center
        self.center = (cx + dx, cy + dy)

    def resize(self, width: int, height: int) -> None:
        """Adapt to a new window size, letterboxing the viewport."""
        if width <= 0 or height <= 0:
            raise ValueError("window dimensions must be positive")
        self.window_width = int(width)
        self.window_height = int(height)

        window_ratio = width / height
        view_ratio = self.size[0] / self.size[1]
        left, top, vp_width, vp_height = 0.0, 0.0, 1.0, 1.0
        if window_ratio > view_ratio:
            vp_height = view_ratio / window_ratio
            top = (1.0 - vp_height) / 2.0
        elif window_ratio < view_ratio:
            vp_width = window_ratio / view_ratio
            left = (1.0 - vp_width) / 2.0
        self.viewport = (left, top, vp_width, vp_height)

    @property
    def viewport_pixels(self) -> tuple[float, float, float, float]:
        """The viewport as ``(x, y, width, height)`` in window pixels."""
        left, top, width, height = self.viewport
        return (
            left * self.window_width,
            top * self.window_height,
            width * self.window_width,
            height * self.window_height,
        )

    def screen_to_world(self, px: float, py: float) -> tuple[float, float]:
        """Map a window pixel to world coordinates."""
        vx, vy, vw, vh = self.viewport_pixels
        cx, cy = self.center
        sw, sh = self.size
        return (
            cx + ((px - vx) / vw - 0.5) * sw,
            cy + ((py - vy) / vh - 0.5) * sh,
        )

    def world_to_screen(self, wx: float, wy: float) -> tuple[float, float]:
        """Map world coordinates to a window pixel."""
        vx, vy, vw, vh = self.viewport_pixels
        cx, cy = self.center
        sw, sh = self.size
        return (
            vx + ((wx - cx) / sw + 0.5) * vw,
            vy + ((wy - cy) / sh + 0.5) * vh,
        )

    def zoom_at(self, factor: float, px: float, py: float) -> None:
        """Zoom while keeping the world point under pixel ``(px, py)`` in place."""
        before = self.screen_to_world(px, py)
        self.zoom(factor)
        after = self.screen_to_world(px, py)
        self.move(before[0] - after[0], before[1] - after[1])

    def drag(self, dx_pixels: float, dy_pixels: float) -> None:
        """Pan so the world follows a mouse that moved by the given pixels."""
        _, _, vw, vh = self.viewport_pixels
        sw, sh = self.size
        self.move(-dx_pixels * sw / vw, -dy_pixels * sh / vh)