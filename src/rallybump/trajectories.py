# Competitor position lines and stage markers
from dataclasses import dataclass, field
from typing import List, Optional

from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from .layout import DEFAULT_LAYOUT

TRAJECTORY_ZORDER = 3


@dataclass
class Trajectory:
    """The artists drawn for one competitor."""

    name: str
    line: Optional[Line2D] = None
    markers: List[Circle] = field(default_factory=list)

    @property
    def segments(self):
        if self.line is None:
            return 0
        return len(self.line.get_xdata()) - 1


def trajectory_points(competitor, scales):
    return [
        (scales.x(r.stage.distance), scales.y(r.position))
        for r in competitor.results
    ]


def draw_trajectories(ax, competitors, scales, layout=DEFAULT_LAYOUT):
    """Draw a line and a set of markers for each competitor.

    Competitors are painted in the order given, so later competitors sit on
    top of earlier ones where they overlap.
    """
    trajectories = []
    for i, competitor in enumerate(competitors):
        color = scales.color(competitor.name)
        points = trajectory_points(competitor, scales)
        zorder = TRAJECTORY_ZORDER + i
        trajectory = Trajectory(name=competitor.name)

        if len(points) > 1:
            xs, ys = zip(*points)
            (trajectory.line,) = ax.plot(
                xs,
                ys,
                color=color,
                linewidth=layout.points(layout.stroke_width),
                linestyle="-",
                marker="",
                zorder=zorder,
            )

        for x, y in points:
            marker = Circle(
                (x, y),
                radius=layout.marker_radius,
                facecolor=color,
                edgecolor=layout.marker_edge_color,
                linewidth=layout.points(layout.marker_edge_width),
                # markers sit above this competitor's line, below the next one
                zorder=zorder + 0.5,
            )
            ax.add_patch(marker)
            trajectory.markers.append(marker)

        trajectories.append(trajectory)
    return trajectories
