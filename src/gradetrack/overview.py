import html

from IPython.display import HTML as _HTML
from IPython.display import display as _display

from . import plot as _plot
from .core import Calculator


def _item(desc, msg) -> str:
    """Returns HTML for an item with a description and a message."""
    return f"<p><b>{desc}:</b> {msg}"


def _display_html(html: str):
    """Display HTML in a Jupyter notebook."""
    _display(_HTML(html))


def overview(calculator: Calculator, target=None):
    """Display a nicely-formatted overview of a calculator.

    Only available inside of a jupyter notebook. Can be accessed from the
    top-level, too, as ``gradetrack.overview()``.

    Parameters
    ----------
    calculator : Calculator
    target : number, optional
        If given, the grade needed on the remaining assessments to reach this
        overall grade is shown as well.

    """
    name = html.escape(calculator.name)
    _display_html(f"<h1>Calculator Overview: {name}</h1>")
    _display_html(_item("Final grade so far", calculator.final_grade))

    if target is not None:
        _display_html(
            _item(
                f"Needed on remaining assessments for {html.escape(str(target))}",
                calculator.required_grade(target),
            )
        )

    if not calculator.weights_sum_to(100) and not calculator.weights_sum_to(1):
        _display_html(
            _item("Warning", f"weights sum to {calculator.total_weight:g}")
        )

    _display_html("<h2>Assessments</h2>")
    _display_html(calculator.to_frame().to_html())

    _display(_plot.grade_breakdown(calculator))
