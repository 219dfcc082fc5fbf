"""
Display helpers for the result screen: radar figure, "waste time" wave frames
and the debug answer table. These only read profile data.
"""

import math
from typing import Iterable, List, Optional, Sequence

import pandas as pd
import plotly.graph_objects as go

from quiz.scoring import Answer, AxisScore, round_half_up

MAX_AXIS_VALUE = 5


def wave_profile(axes: Sequence[str], frame: int) -> List[AxisScore]:
    """
    Animated stand-in profile for a given frame number.

    value_i = round(2.5 + 2.5 * sin((frame + i) / 2)), always within 0..5.
    """
    return [
        AxisScore(axis=axis, value=round_half_up(2.5 + 2.5 * math.sin((frame + i) / 2)))
        for i, axis in enumerate(axes)
    ]


def build_radar_figure(
    profile: Iterable[AxisScore],
    title: Optional[str] = None,
    height: int = 500,
) -> go.Figure:
    """Radar chart of a profile on a fixed 0..5 radial scale."""
    points = list(profile)
    axes = [p.axis for p in points]
    values = [p.value for p in points]

    fig = go.Figure(data=[
        go.Scatterpolar(
            # repeat the first point to close the polygon
            r=values + values[:1],
            theta=axes + axes[:1],
            fill="toself",
            name="Profile",
            line_color="#6A1B9A",
            fillcolor="rgba(255, 0, 0, 0.6)",
        )
    ])
    fig.update_layout(
        title=title,
        height=height,
        showlegend=False,
        template="plotly_white",
        polar=dict(
            radialaxis=dict(visible=True, range=[0, MAX_AXIS_VALUE], dtick=1, angle=30),
        ),
    )
    return fig


def answers_to_dataframe(answers: Iterable[Answer]) -> pd.DataFrame:
    """Debug table: one row per recorded answer, numbered from 1."""
    rows = [{"Q#": i, "Axis": a.axis, "Score": a.score} for i, a in enumerate(answers, start=1)]
    return pd.DataFrame(rows, columns=["Q#", "Axis", "Score"])


def profile_to_dataframe(profile: Iterable[AxisScore]) -> pd.DataFrame:
    return pd.DataFrame([p.as_dict() for p in profile], columns=["axis", "value"])
