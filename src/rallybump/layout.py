# Chart geometry and styling
from dataclasses import dataclass


@dataclass(frozen=True)
class ChartLayout:
    """Fixed size drawing canvas, in pixel units, and the chart styling.

    The y axis of the canvas grows downwards, so ``margin_top`` is the
    smallest y value used by the plotting area.
    """

    width: int = 800
    height: int = 600
    margin_top: int = 30
    margin_right: int = 30
    margin_bottom: int = 30
    margin_left: int = 50
    dpi: int = 100
    font_size: float = 10
    font_family: str = "sans-serif"
    foreground: str = "black"
    tick_length: float = 6
    label_offset: float = 12
    tick_width: float = 1
    stroke_width: float = 1.5
    marker_radius: float = 7.5
    marker_edge_color: str = "white"
    marker_edge_width: float = 1
    palette: str = "tab10"

    @property
    def figsize(self):
        return (self.width / self.dpi, self.height / self.dpi)

    @property
    def font_size_points(self):
        # Font sizes are given in pixels; matplotlib wants points
        return self.points(self.font_size)

    def points(self, px):
        """Convert a length in canvas pixels to points."""
        return px * 72 / self.dpi

    @property
    def x_range(self):
        return (self.margin_left, self.width - self.margin_right)

    @property
    def y_range(self):
        return (self.margin_top, self.height - self.margin_bottom)


DEFAULT_LAYOUT = ChartLayout()
