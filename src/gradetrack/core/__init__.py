from ._parsing import (
    NOT_AVAILABLE,
    RawValue,
    parse_fraction_or_float,
    parse_weight,
    format_percentage,
)
from ._assessments import Assessment, Assessments, total_weight, weights_sum_to
from ._calculator import Calculator, calculate_final_grade, calculate_required_grade
from ._courses import Course, Courses, Prerequisite

__all__ = [
    "NOT_AVAILABLE",
    "RawValue",
    "parse_fraction_or_float",
    "parse_weight",
    "format_percentage",
    "Assessment",
    "Assessments",
    "total_weight",
    "weights_sum_to",
    "Calculator",
    "calculate_final_grade",
    "calculate_required_grade",
    "Course",
    "Courses",
    "Prerequisite",
]
