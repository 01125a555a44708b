import typing

import bokeh.io
import bokeh.models
import bokeh.plotting
import numpy as np

from ._util import in_jupyter_notebook as _in_jupyter_notebook
from .core import Calculator
from .organizer import levels_table as _levels_table
from .organizer import sort_courses_by_prerequisites as _sort_courses

# grade_breakdown ----------------------------------------------------------------------


def _bar_edges(weights: np.ndarray) -> typing.Tuple[np.ndarray, np.ndarray]:
    """Left and right edges of bars laid side by side with the given widths."""
    right = np.cumsum(weights)
    left = right - weights
    return left, right


def grade_breakdown(calculator: Calculator):
    """Visualize each graded assessment's percentage.

    Each assessment is drawn as a bar whose height is its percentage and whose
    width is its weight, so the shaded area is proportional to the
    assessment's contribution to the final grade. The final grade is drawn as a
    dashed horizontal line.

    Parameters
    ----------
    calculator : Calculator

    Returns
    -------
    bokeh.plotting.figure

    """
    if _in_jupyter_notebook():
        bokeh.io.output_notebook()

    table = calculator.assessments.graded().to_frame()
    table["name"] = table["name"].fillna("").astype(str)
    table["left"], table["right"] = _bar_edges(table["weight"].to_numpy())

    y_max = max(100.0, float(table["percentage"].max()) if len(table) else 0.0) * 1.1
    x_max = float(table["right"].max()) if len(table) else 1.0

    fig = bokeh.plotting.figure(
        title=f"Grade Breakdown: {calculator.name}",
        min_width=800,
        min_height=400,
        x_range=[0, x_max],
        y_range=[0, y_max],
        tools="hover,pan,box_zoom,save,reset,help",
    )

    source = bokeh.models.ColumnDataSource(table)
    fig.quad(
        top="percentage",
        bottom=0,
        left="left",
        right="right",
        source=source,
        fill_alpha=0.7,
        line_color="white",
    )

    fig.hover.tooltips = [
        ("assessment", "@name"),
        ("grade", "@{percentage}{0.00}%"),
        ("weight", "@weight"),
    ]

    final = calculator.final_grade
    if final != "N/A":
        fig.line([0, x_max], [float(final)] * 2, line_dash="dashed", color="black")

    fig.xaxis.axis_label = "weight"
    fig.yaxis.axis_label = "grade (%)"
    fig.grid.visible = False

    return fig


# prerequisite_levels ------------------------------------------------------------------


def prerequisite_levels(courses: typing.Iterable):
    """Visualize courses arranged by prerequisite level.

    Courses are placed in columns by level, with completed courses filled in.

    Parameters
    ----------
    courses : Iterable[Course or Mapping]

    Returns
    -------
    bokeh.plotting.figure

    """
    if _in_jupyter_notebook():
        bokeh.io.output_notebook()

    table = _levels_table(_sort_courses(courses))
    table["row"] = table.groupby("level").cumcount()
    table["color"] = np.where(table["completed"], "black", "white")

    fig = bokeh.plotting.figure(
        title="Courses by Prerequisite Level",
        min_width=800,
        min_height=400,
        tools="hover,pan,box_zoom,save,reset,help",
    )

    source = bokeh.models.ColumnDataSource(table)
    fig.scatter(
        "level",
        "row",
        source=source,
        size=14,
        line_color="black",
        fill_color="color",
    )

    fig.hover.tooltips = [("course", "@name"), ("level", "@level")]

    fig.xaxis.axis_label = "level"
    fig.xaxis.ticker = [int(level) for level in sorted(set(table["level"]))]
    fig.yaxis.visible = False
    fig.grid.visible = False

    return fig
