from numbers import Number

from pandas import melt, to_numeric
from numpy import nan

from .models import Competitor, Result, Stage


def _require_cols(df, cols):
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")


def time_to_seconds(time_str):
    """Convert a `h:mm:ss.t`, `m:ss.t` or `s.t` time string to seconds.

    Numbers are passed through; anything unparseable becomes NaN.
    """
    if isinstance(time_str, Number):
        return float(time_str)
    if not time_str or not isinstance(time_str, str):
        return nan

    try:
        parts = time_str.strip().split(":")
        if len(parts) == 3:  # Hours, minutes, seconds.tenths
            hours, minutes, seconds = parts
            total_seconds = int(hours) * 3600 + int(minutes) * 60 + float(seconds)
        elif len(parts) == 2:  # Minutes, seconds.tenths
            minutes, seconds = parts
            total_seconds = int(minutes) * 60 + float(seconds)
        else:
            total_seconds = float(parts[0])
        return round(total_seconds, 1)

    except (ValueError, TypeError):
        return nan


def stages_from_df(df, name_col="code", distance_col="distance"):
    """Stage records from a stages table, keeping the table's row order."""
    _require_cols(df, [name_col, distance_col])
    return [
        Stage(str(name), float(distance))
        for name, distance in zip(df[name_col], df[distance_col])
    ]


def positions_from_times_wide(df, stage_cols, id_col="carNo"):
    """Rank cumulative times at each stage and return a long positions table.

    Each stage column holds a competitor's overall time after that stage,
    either as seconds or as a time string. The result has one row per
    competitor per stage they have a time for, with columns `id_col`,
    `roundN` and `position`. Tied times share the better position.
    """
    stage_cols = [stage_cols] if isinstance(stage_cols, str) else list(stage_cols)
    _require_cols(df, [id_col] + stage_cols)

    times_wide = df[[id_col] + stage_cols].copy()
    times_wide[stage_cols] = times_wide[stage_cols].apply(
        lambda col: to_numeric(col.map(time_to_seconds), errors="coerce").rank(
            method="min", ascending=True
        )
    )

    positions_long = melt(
        times_wide,
        id_vars=[id_col],
        value_vars=stage_cols,
        var_name="roundN",
        value_name="position",
    )
    # No time means no result for that stage, eg after a retirement
    positions_long = positions_long.dropna(subset=["position"])
    positions_long["position"] = positions_long["position"].astype(int)
    return positions_long.reset_index(drop=True)


def competitors_from_long_df(
    df, stages, id_col="carNo", stage_col="roundN", position_col="position"
):
    """Competitor records from a long table of positions by stage.

    Competitors keep the order they first appear in the table and their
    results are put into stage order. Rows without a position are ignored.
    """
    _require_cols(df, [id_col, stage_col, position_col])
    # Stage names are held as strings, see stages_from_df
    df = df.assign(**{stage_col: df[stage_col].map(str, na_action="ignore")})
    stage_lookup = {s.name: s for s in stages}
    stage_order = {s.name: i for i, s in enumerate(stages)}

    unknown = set(df[stage_col].dropna()) - set(stage_lookup)
    if unknown:
        raise ValueError(
            f"Positions reference unknown stages: {', '.join(sorted(map(str, unknown)))}"
        )

    competitors = []
    for name, rows in df.groupby(id_col, sort=False):
        rows = rows.dropna(subset=[stage_col, position_col])
        rows = rows.assign(_stage_order=rows[stage_col].map(stage_order))
        rows = rows.sort_values("_stage_order", kind="stable")
        results = [
            Result(stage_lookup[stage], int(position))
            for stage, position in zip(rows[stage_col], rows[position_col])
        ]
        competitors.append(Competitor(str(name), results))
    return competitors
