"""Weighted grade calculations."""

import math
import typing

import pandas as pd

from ._assessments import Assessment, Assessments, total_weight, weights_sum_to
from ._parsing import NOT_AVAILABLE, format_percentage, parse_target


# public functions =====================================================================


def calculate_final_grade(assessments: typing.Iterable) -> str:
    """Compute the weighted average of the graded assessments.

    An assessment is graded if its grade parses (see
    :func:`parse_fraction_or_float`) and it has a usable weight. Everything else
    is ignored.

    Parameters
    ----------
    assessments : Iterable[Assessment or Mapping]
        The assessments. Mappings need ``grade`` and ``weight`` keys.

    Returns
    -------
    str
        The weighted average formatted with two decimal places, e.g. ``"85.20"``,
        or ``"N/A"`` if nothing is graded or the graded weights sum to zero.

    Example
    -------
    >>> calculate_final_grade([
    ...     {"grade": "90", "weight": "0.6"},
    ...     {"grade": "78", "weight": "0.4"},
    ... ])
    '85.20'

    """
    graded = Assessments(assessments).graded()

    if len(graded) == 0:
        return NOT_AVAILABLE

    weight_sum = 0.0
    for assessment in graded:
        weight_sum += assessment.numeric_weight

    if weight_sum == 0:
        return NOT_AVAILABLE

    weighted_sum = 0.0
    for assessment in graded:
        weighted_sum += assessment.percentage * assessment.numeric_weight

    result = weighted_sum / weight_sum
    if not math.isfinite(result):
        return NOT_AVAILABLE

    return format_percentage(result)


def calculate_required_grade(assessments: typing.Iterable, min_desired_grade) -> str:
    """Compute the average grade needed on the remaining assessments.

    The remaining assessments are those with a usable weight but no parseable
    grade. The result is the grade that, if earned on every remaining
    assessment, brings the overall weighted average to ``min_desired_grade``.

    The result is not clamped. A value above 100 means the target is out of
    reach; a negative value means it has already been secured.

    Parameters
    ----------
    assessments : Iterable[Assessment or Mapping]
        The assessments. Mappings need ``grade`` and ``weight`` keys.
    min_desired_grade : number or str
        The overall grade the student is aiming for.

    Returns
    -------
    str
        The required grade formatted with two decimal places, or ``"N/A"`` if
        the target is missing or not a number, nothing remains to be graded,
        or the result is not finite.

    Example
    -------
    >>> calculate_required_grade([
    ...     {"grade": "70", "weight": "0.5"},
    ...     {"grade": None, "weight": "0.5"},
    ... ], 80)
    '90.00'

    """
    target = parse_target(min_desired_grade)
    if target is None:
        return NOT_AVAILABLE

    assessments = Assessments(assessments)
    completed = assessments.graded()
    remaining = assessments.remaining()

    if len(remaining) == 0:
        return NOT_AVAILABLE

    weight_sum = total_weight(assessments)

    remaining_weight = 0.0
    for assessment in remaining:
        remaining_weight += assessment.numeric_weight

    completed_weighted_sum = 0.0
    for assessment in completed:
        completed_weighted_sum += assessment.percentage * assessment.numeric_weight

    try:
        required = (target * weight_sum - completed_weighted_sum) / remaining_weight
    except ZeroDivisionError:
        return NOT_AVAILABLE

    if not math.isfinite(required):
        return NOT_AVAILABLE

    return format_percentage(required)


# public classes =======================================================================


class Calculator:
    """A named collection of assessments belonging to a user.

    Attributes
    ----------
    name : str
        The calculator's name, e.g. the course it tracks.
    assessments : Assessments
        The assessments, in display order.

    """

    def __init__(self, name: str, assessments: typing.Iterable = ()):
        self.name = name
        self.assessments = Assessments(assessments)

    def __repr__(self):
        return f"Calculator(name={self.name!r}, assessments={len(self.assessments)})"

    def __eq__(self, other):
        if not isinstance(other, Calculator):
            return False
        return self.name == other.name and self.assessments == other.assessments

    @classmethod
    def from_template(cls, template, name: typing.Optional[str] = None) -> "Calculator":
        """Seed a new calculator from a template.

        The template's assessment names and weights are copied; every grade
        starts out empty.

        Parameters
        ----------
        template : Template
            The template to copy.
        name : Optional[str]
            The new calculator's name. Defaults to the template's name.

        """
        assessments = [
            Assessment(grade=None, weight=a.weight, name=a.name)
            for a in template.assessments
        ]
        return cls(name if name is not None else template.name, assessments)

    @property
    def final_grade(self) -> str:
        """The weighted average so far. See :func:`calculate_final_grade`."""
        return calculate_final_grade(self.assessments)

    def required_grade(self, min_desired_grade) -> str:
        """See :func:`calculate_required_grade`."""
        return calculate_required_grade(self.assessments, min_desired_grade)

    @property
    def total_weight(self) -> float:
        return total_weight(self.assessments)

    def weights_sum_to(self, expected: float = 100, tolerance: float = 1e-6) -> bool:
        return weights_sum_to(self.assessments, expected, tolerance)

    def to_frame(self) -> pd.DataFrame:
        return self.assessments.to_frame()
