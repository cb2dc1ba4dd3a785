# Stage and competitor axis decorations
import logging

from .layout import DEFAULT_LAYOUT

logger = logging.getLogger(__name__)

STAGE_AXIS_ZORDER = 1
COMPETITOR_AXIS_ZORDER = 2


def _label_style(layout):
    return dict(
        fontsize=layout.font_size_points,
        family=layout.font_family,
        color=layout.foreground,
    )


def draw_stage_axis(ax, stages, scales, layout=DEFAULT_LAYOUT):
    """Mark each stage above and below the plotting area.

    Each stage gets a short dash at the top margin and another at the bottom
    margin, with the stage name written outwards from each dash. Both names
    read bottom to top.
    """
    top = layout.margin_top
    bottom = layout.height - layout.margin_bottom
    artists = []
    for stage in stages:
        x = scales.x(stage.distance)
        # top dash
        artists.extend(
            ax.plot(
                [x, x],
                [top - layout.tick_length, top],
                color=layout.foreground,
                linewidth=layout.points(layout.tick_width),
                solid_capstyle="butt",
                zorder=STAGE_AXIS_ZORDER,
            )
        )
        # bottom dash
        artists.extend(
            ax.plot(
                [x, x],
                [bottom + layout.tick_length, bottom],
                color=layout.foreground,
                linewidth=layout.points(layout.tick_width),
                solid_capstyle="butt",
                zorder=STAGE_AXIS_ZORDER,
            )
        )
        # top stage name, starts at the anchor and runs upwards
        artists.append(
            ax.text(
                x,
                layout.margin_top - layout.label_offset,
                stage.name,
                rotation=90,
                rotation_mode="anchor",
                ha="left",
                va="center",
                zorder=STAGE_AXIS_ZORDER,
                **_label_style(layout),
            )
        )
        # bottom stage name, ends at the anchor so it hangs downwards
        artists.append(
            ax.text(
                x,
                bottom + layout.label_offset,
                stage.name,
                rotation=90,
                rotation_mode="anchor",
                ha="right",
                va="center",
                zorder=STAGE_AXIS_ZORDER,
                **_label_style(layout),
            )
        )
    return artists


def draw_competitor_axis(ax, competitors, scales, layout=DEFAULT_LAYOUT):
    """Label each competitor in the left margin, level with their starting rank."""
    artists = []
    for competitor in competitors:
        first = competitor.first_result
        if first is None:
            logger.debug(f"No results for {competitor.name}, skipping label")
            continue
        # x = 0 is the outer edge of the left margin band
        artists.append(
            ax.text(
                0,
                scales.y(first.position),
                competitor.name,
                ha="left",
                va="center",
                zorder=COMPETITOR_AXIS_ZORDER,
                **_label_style(layout),
            )
        )
    return artists
