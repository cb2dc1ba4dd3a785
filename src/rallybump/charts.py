# Bump chart of competitor positions across rally stages
import logging
from dataclasses import dataclass, field
from typing import Any, List

from matplotlib import pyplot as plt

from .axes import draw_competitor_axis, draw_stage_axis
from .layout import DEFAULT_LAYOUT
from .scales import ChartScales, build_scales
from .trajectories import Trajectory, draw_trajectories
from .utils import competitors_from_long_df

logger = logging.getLogger(__name__)


@dataclass
class BumpChart:
    figure: Any
    axes: Any
    scales: ChartScales
    stage_axis: List[Any] = field(default_factory=list)
    competitor_axis: List[Any] = field(default_factory=list)
    trajectories: List[Trajectory] = field(default_factory=list)


def prepare_surface(fig=None, layout=DEFAULT_LAYOUT):
    """Return a blank full-figure axes laid out in canvas pixel units.

    An existing figure is cleared and reused; otherwise a new one is made.
    The y axis is flipped so that y grows downwards from the top edge.
    """
    if fig is None:
        fig = plt.figure(figsize=layout.figsize, dpi=layout.dpi)
    else:
        fig.clear()
        fig.set_size_inches(*layout.figsize)
        fig.set_dpi(layout.dpi)

    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, layout.width)
    ax.set_ylim(layout.height, 0)
    ax.axis("off")
    return ax


def build_chart(stages, competitors, fig=None, layout=DEFAULT_LAYOUT):
    """Render the bump chart for a set of stages and competitors.

    The stage axis is drawn first, then the competitor labels, then the
    position lines, so the lines paint over the axis decorations. Each call
    redraws the figure from scratch.

    Args:
        stages: Stage records, in the order they should be labelled.
        competitors: Competitor records; this order is also the paint order.
        fig: Optional matplotlib figure to draw into. It is cleared first.
        layout: ChartLayout giving the canvas size, margins and styling.

    Returns:
        BumpChart holding the figure, axes, scales and the drawn artists.
    """
    stages = list(stages)
    competitors = list(competitors)
    ax = prepare_surface(fig, layout)
    scales = build_scales(stages, competitors, layout)

    logger.debug(
        f"Drawing bump chart: {len(stages)} stages, {len(competitors)} competitors"
    )
    chart = BumpChart(figure=ax.figure, axes=ax, scales=scales)
    chart.stage_axis = draw_stage_axis(ax, stages, scales, layout)
    chart.competitor_axis = draw_competitor_axis(ax, competitors, scales, layout)
    chart.trajectories = draw_trajectories(ax, competitors, scales, layout)
    return chart


def chart_bump_positions(
    positions_long,
    stages,
    fig=None,
    layout=DEFAULT_LAYOUT,
    id_col="carNo",
    stage_col="roundN",
    position_col="position",
):
    """Bump chart from a long format table of positions by stage."""
    competitors = competitors_from_long_df(
        positions_long,
        stages,
        id_col=id_col,
        stage_col=stage_col,
        position_col=position_col,
    )
    return build_chart(stages, competitors, fig=fig, layout=layout)
