# Coordinate and colour scales for the bump chart
from dataclasses import dataclass

from numpy import isfinite
from seaborn import color_palette

from .layout import DEFAULT_LAYOUT


class LinearScale:
    """Map a numeric domain interval linearly onto a pixel range.

    Values outside the domain are extrapolated, not clamped. If the domain
    has zero width (for example a single stage, or a single competitor) every
    value maps onto the midpoint of the range.
    """

    def __init__(self, domain, output_range):
        self.domain = tuple(float(d) for d in domain)
        self.range = tuple(float(r) for r in output_range)

    @property
    def degenerate(self):
        d0, d1 = self.domain
        span = d1 - d0
        return not isfinite(span) or span == 0

    def __call__(self, value):
        d0, d1 = self.domain
        r0, r1 = self.range
        if self.degenerate:
            return (r0 + r1) / 2
        t = (float(value) - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)

    def __repr__(self):
        return f"LinearScale(domain={self.domain}, range={self.range})"


class OrdinalScale:
    """Assign palette colours to names in the order the names are first seen.

    When there are more names than colours the palette is reused cyclically.
    Looking up a name that was not in the initial domain adds it to the end
    of the domain.
    """

    def __init__(self, domain, palette):
        if not palette:
            raise ValueError("palette must contain at least one colour")
        self.palette = tuple(palette)
        self._index = {}
        for name in domain:
            self._add(name)

    def _add(self, name):
        if name not in self._index:
            self._index[name] = len(self._index)
        return self._index[name]

    @property
    def domain(self):
        return list(self._index)

    def __call__(self, name):
        return self.palette[self._add(name) % len(self.palette)]


def category_palette(name="tab10"):
    """Categorical palette as hex colour strings."""
    return color_palette(name).as_hex()


def stage_extent(stages):
    """Return the (min, max) stage distance, or (0, 0) with no stages."""
    distances = [s.distance for s in stages]
    if not distances:
        return (0.0, 0.0)
    return (min(distances), max(distances))


@dataclass(frozen=True)
class ChartScales:
    x: LinearScale
    y: LinearScale
    color: OrdinalScale


def build_scales(stages, competitors, layout=DEFAULT_LAYOUT):
    """Derive the distance, rank and colour scales from the dataset.

    Rank 1 sits at the top margin and the last rank at the bottom margin;
    the rank domain runs over the number of competitors, not the ranks
    actually seen at any one stage.
    """
    x = LinearScale(stage_extent(stages), layout.x_range)
    y = LinearScale((1, max(len(competitors), 1)), layout.y_range)
    color = OrdinalScale(
        [c.name for c in competitors], category_palette(layout.palette)
    )
    return ChartScales(x=x, y=y, color=color)
