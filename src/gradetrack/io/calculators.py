"""Read calculators from CSV files.

The CSV must have a header with a ``name`` column and a ``weight`` column, and
may have a ``grade`` column. Grades are kept as text so that fractions such as
``17/20`` are parsed by the grade engine rather than by pandas. Empty cells are
read as missing.

"""

import pathlib as _pathlib
from typing import Optional, Union

import pandas as _pd

from ..core import Assessment, Calculator


def _none_if_empty(value: str) -> Optional[str]:
    value = value.strip()
    return value if value else None


def read_csv(
    path: Union[str, _pathlib.Path], name: Optional[str] = None
) -> Calculator:
    """Read a calculator from a CSV of assessments.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the CSV file that will be read.
    name : Optional[str]
        The calculator's name. Default: the file's stem.

    Returns
    -------
    Calculator

    Raises
    ------
    ValueError
        If the ``name`` or ``weight`` column is missing.

    """
    path = _pathlib.Path(path)
    table = _pd.read_csv(path, dtype=str, keep_default_na=False)
    table.columns = [str(c).strip().lower() for c in table.columns]

    missing = {"name", "weight"} - set(table.columns)
    if missing:
        raise ValueError(f"{path} is missing columns: {sorted(missing)}.")

    grades = table["grade"] if "grade" in table.columns else [""] * len(table)

    assessments = [
        Assessment(
            grade=_none_if_empty(grade),
            weight=_none_if_empty(weight),
            name=_none_if_empty(assessment_name),
        )
        for assessment_name, weight, grade in zip(
            table["name"], table["weight"], grades
        )
    ]

    return Calculator(name if name is not None else path.stem, assessments)
