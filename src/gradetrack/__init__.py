"""A package for tracking weighted grades and course prerequisites."""

import logging as _logging

from .core import (
    NOT_AVAILABLE,
    Assessment,
    Assessments,
    Calculator,
    Course,
    Courses,
    Prerequisite,
    calculate_final_grade,
    calculate_required_grade,
    format_percentage,
    parse_fraction_or_float,
    total_weight,
    weights_sum_to,
)
from .organizer import (
    filter_courses,
    flatten_sorted_courses,
    is_prerequisite_for_other_courses,
    levels_table,
    sort_courses_by_prerequisites,
)
from .templates import (
    SearchOptions,
    SearchResults,
    Template,
    TemplateAssessment,
    search_templates,
)

from . import io
from . import plot
from . import _util

if _util.in_jupyter_notebook():
    from .overview import overview  # type: ignore

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "NOT_AVAILABLE",
    "Assessment",
    "Assessments",
    "Calculator",
    "Course",
    "Courses",
    "Prerequisite",
    "calculate_final_grade",
    "calculate_required_grade",
    "format_percentage",
    "parse_fraction_or_float",
    "total_weight",
    "weights_sum_to",
    "filter_courses",
    "flatten_sorted_courses",
    "is_prerequisite_for_other_courses",
    "levels_table",
    "sort_courses_by_prerequisites",
    "SearchOptions",
    "SearchResults",
    "Template",
    "TemplateAssessment",
    "search_templates",
    "io",
    "plot",
]
