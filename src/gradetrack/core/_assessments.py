"""Represents the assessments that make up a calculator."""

import dataclasses
import typing
from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd

from ._parsing import RawValue, parse_fraction_or_float, parse_weight


@dataclasses.dataclass(frozen=True)
class Assessment:
    """One graded component of a course, such as a midterm.

    Attributes
    ----------
    grade : str, int, float, or None
        The raw grade. Either a percentage (``"85"``), a fraction (``"17/20"``),
        or ``None``/``""`` if the assessment has not been graded yet.
    weight : str, int, float, or None
        The assessment's weight. Weights can be fractions of one or
        percentages; they only need to be consistent within a calculator.
    name : Optional[str]
        A display name. Not used in any calculation.

    """

    grade: RawValue = None
    weight: RawValue = None
    name: typing.Optional[str] = None

    @classmethod
    def coerce(cls, obj: typing.Union["Assessment", Mapping]) -> "Assessment":
        """Build an :class:`Assessment` from an assessment or a mapping.

        Mappings are read with ``.get``, so missing keys are treated as ``None``.

        Raises
        ------
        TypeError
            If ``obj`` is neither an :class:`Assessment` nor a mapping.

        """
        if isinstance(obj, Assessment):
            return obj

        if isinstance(obj, Mapping):
            return cls(
                grade=obj.get("grade"), weight=obj.get("weight"), name=obj.get("name")
            )

        raise TypeError(f"Cannot interpret {obj!r} as an assessment.")

    @property
    def percentage(self) -> typing.Optional[float]:
        """The grade as a percentage, or ``None`` if it does not parse."""
        return parse_fraction_or_float(self.grade)

    @property
    def numeric_weight(self) -> typing.Optional[float]:
        """The weight as a float, or ``None`` if it is absent or not a number."""
        return parse_weight(self.weight)

    @property
    def is_weighted(self) -> bool:
        return self.numeric_weight is not None

    @property
    def is_graded(self) -> bool:
        """Whether the assessment counts towards the final grade."""
        return self.is_weighted and self.percentage is not None

    @property
    def is_remaining(self) -> bool:
        """Whether the assessment is weighted but still waiting for a grade."""
        return self.is_weighted and self.percentage is None


class Assessments(Sequence):
    """A sequence of :class:`Assessment` instances.

    Behaves like a list, but coerces each element on construction and provides
    methods for selecting graded and remaining assessments.

    """

    def __init__(self, assessments: typing.Iterable = ()):
        self._assessments = [Assessment.coerce(a) for a in assessments]

    def __getitem__(self, ix):
        return self._assessments[ix]

    def __len__(self):
        return len(self._assessments)

    def __eq__(self, other):
        return list(self) == list(other)

    def __repr__(self):
        return f"Assessments({self._assessments!r})"

    def graded(self) -> "Assessments":
        """Only those assessments that count towards the final grade."""
        return self.__class__([a for a in self._assessments if a.is_graded])

    def remaining(self) -> "Assessments":
        """Only those weighted assessments that do not have a grade yet."""
        return self.__class__([a for a in self._assessments if a.is_remaining])

    def weighted(self) -> "Assessments":
        """Only those assessments with a usable weight."""
        return self.__class__([a for a in self._assessments if a.is_weighted])

    def to_frame(self) -> pd.DataFrame:
        """A table with one row per assessment.

        The columns are ``name``, ``grade`` (the raw value), ``weight``,
        ``percentage``, and ``contribution``, which is the percentage times
        the weight. Missing numbers are ``NaN``.

        """

        def _num(x):
            return np.nan if x is None else x

        rows = []
        for a in self._assessments:
            percentage = _num(a.percentage)
            weight = _num(a.numeric_weight)
            rows.append(
                {
                    "name": a.name,
                    "grade": a.grade,
                    "weight": weight,
                    "percentage": percentage,
                    "contribution": percentage * weight,
                }
            )

        return pd.DataFrame(
            rows, columns=["name", "grade", "weight", "percentage", "contribution"]
        ).astype({"weight": float, "percentage": float, "contribution": float})


def total_weight(assessments: typing.Iterable) -> float:
    """The sum of all usable weights."""
    return sum(
        (a.numeric_weight for a in Assessments(assessments).weighted()), start=0.0
    )


def weights_sum_to(
    assessments: typing.Iterable, expected: float = 100, tolerance: float = 1e-6
) -> bool:
    """Check whether the usable weights add up to ``expected``.

    Calculations never require this; it is meant for warning users whose
    weights look incomplete.

    """
    return abs(total_weight(assessments) - expected) <= tolerance
