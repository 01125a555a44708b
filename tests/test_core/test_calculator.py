import pytest  # pyright: ignore

import gradetrack

# calculate_final_grade ----------------------------------------------------------------


def test_final_grade_is_weighted_average():
    # given
    assessments = [
        {"grade": "90", "weight": "0.6"},
        {"grade": "78", "weight": "0.4"},
    ]

    # when
    result = gradetrack.calculate_final_grade(assessments)

    # then
    assert result == "85.20"


def test_final_grade_with_percentage_weights():
    assessments = [
        {"grade": "75", "weight": "50"},
        {"grade": "95", "weight": "50"},
    ]
    assert gradetrack.calculate_final_grade(assessments) == "85.00"


def test_final_grade_accepts_fractions_and_numbers():
    assessments = [
        gradetrack.Assessment(grade="17/20", weight=0.5),
        gradetrack.Assessment(grade=95, weight=0.5),
    ]
    assert gradetrack.calculate_final_grade(assessments) == "90.00"


def test_final_grade_is_not_available_when_nothing_is_graded():
    assessments = [
        {"grade": None, "weight": "0.5"},
        {"grade": "", "weight": "0.5"},
    ]
    assert gradetrack.calculate_final_grade(assessments) == "N/A"


def test_final_grade_is_not_available_when_weights_are_missing():
    assessments = [
        {"grade": "90", "weight": None},
        {"grade": "80", "weight": ""},
    ]
    assert gradetrack.calculate_final_grade(assessments) == "N/A"


def test_final_grade_is_not_available_for_empty_input():
    assert gradetrack.calculate_final_grade([]) == "N/A"


def test_final_grade_is_not_available_when_total_weight_is_zero():
    assessments = [
        {"grade": "90", "weight": "0"},
        {"grade": "80", "weight": "0"},
    ]
    assert gradetrack.calculate_final_grade(assessments) == "N/A"


def test_final_grade_ignores_ungraded_and_malformed_assessments():
    # given
    assessments = [
        {"grade": "90", "weight": "0.6"},
        {"grade": None, "weight": "0.2"},
        {"grade": "85", "weight": "0.2"},
        {"grade": "85//20", "weight": "0.5"},
        {"grade": "70", "weight": "lots"},
    ]

    # when
    result = gradetrack.calculate_final_grade(assessments)

    # then
    assert result == "88.75"


def test_final_grade_is_repeatable():
    assessments = [{"grade": "1/3", "weight": 1}, {"grade": "50", "weight": 2}]
    first = gradetrack.calculate_final_grade(assessments)
    assert gradetrack.calculate_final_grade(assessments) == first


def test_final_grade_does_not_mutate_input():
    assessments = [{"grade": "17/20", "weight": "1"}]
    gradetrack.calculate_final_grade(assessments)
    assert assessments == [{"grade": "17/20", "weight": "1"}]


# calculate_required_grade -------------------------------------------------------------


def test_required_grade():
    # given
    assessments = [
        {"grade": "70", "weight": "0.5"},
        {"grade": None, "weight": "0.5"},
    ]

    # when
    result = gradetrack.calculate_required_grade(assessments, 80)

    # then
    assert result == "90.00"


def test_required_grade_with_percentage_weights():
    assessments = [
        {"grade": "75", "weight": "50"},
        {"grade": None, "weight": "50"},
    ]
    assert gradetrack.calculate_required_grade(assessments, 85) == "95.00"


def test_required_grade_is_not_available_when_nothing_remains():
    assessments = [
        {"grade": "70", "weight": "0.5"},
        {"grade": "80", "weight": "0.5"},
    ]
    assert gradetrack.calculate_required_grade(assessments, 85) == "N/A"
    assert gradetrack.calculate_required_grade(assessments, 10) == "N/A"


@pytest.mark.parametrize(
    "target", [None, "", 0, 0.0, "abc", "1_0", float("nan"), float("inf")]
)
def test_required_grade_is_not_available_for_unusable_targets(target):
    assessments = [
        {"grade": "70", "weight": "0.5"},
        {"grade": None, "weight": "0.5"},
    ]
    assert gradetrack.calculate_required_grade(assessments, target) == "N/A"


def test_required_grade_accepts_numeric_string_targets():
    assessments = [
        {"grade": "70", "weight": "0.5"},
        {"grade": None, "weight": "0.5"},
    ]
    assert gradetrack.calculate_required_grade(assessments, "80") == "90.00"


@pytest.mark.parametrize("target", ["0", "0.0"])
def test_required_grade_accepts_zero_given_as_a_string(target):
    # given
    assessments = [
        {"grade": "70", "weight": "0.5"},
        {"grade": None, "weight": "0.5"},
    ]

    # when
    result = gradetrack.calculate_required_grade(assessments, target)

    # then
    # a non-empty string is truthy, so zero is a usable target
    assert result == "-70.00"


def test_weights_with_digit_separators_are_absent():
    assessments = [
        {"grade": "80", "weight": "1_0"},
        {"grade": "60", "weight": "1"},
    ]
    assert gradetrack.calculate_final_grade(assessments) == "60.00"


def test_required_grade_can_be_low_when_target_is_nearly_secured():
    assessments = [
        {"grade": "95", "weight": "0.8"},
        {"grade": None, "weight": "0.2"},
    ]
    assert gradetrack.calculate_required_grade(assessments, 80) == "20.00"


def test_required_grade_with_multiple_remaining_assessments():
    assessments = [
        {"grade": "80", "weight": "0.4"},
        {"grade": None, "weight": "0.3"},
        {"grade": None, "weight": "0.3"},
    ]
    assert gradetrack.calculate_required_grade(assessments, 85) == "88.33"


def test_required_grade_is_not_clamped_above_one_hundred():
    assessments = [
        {"grade": "40", "weight": "50"},
        {"grade": None, "weight": "50"},
    ]
    assert gradetrack.calculate_required_grade(assessments, 90) == "140.00"


def test_required_grade_is_not_clamped_below_zero():
    assessments = [
        {"grade": "100", "weight": "90"},
        {"grade": None, "weight": "10"},
    ]
    assert gradetrack.calculate_required_grade(assessments, 50) == "-400.00"


def test_required_grade_treats_malformed_grades_as_remaining():
    assessments = [
        {"grade": "70", "weight": "0.5"},
        {"grade": "85/0", "weight": "0.5"},
    ]
    assert gradetrack.calculate_required_grade(assessments, 80) == "90.00"


def test_required_grade_ignores_assessments_without_weight():
    assessments = [
        {"grade": "70", "weight": "0.5"},
        {"grade": None, "weight": "0.5"},
        {"grade": "10", "weight": None},
        {"grade": None, "weight": ""},
    ]
    assert gradetrack.calculate_required_grade(assessments, 80) == "90.00"


def test_required_grade_is_not_available_when_remaining_weight_is_zero():
    assessments = [
        {"grade": "70", "weight": "1"},
        {"grade": None, "weight": "0"},
    ]
    assert gradetrack.calculate_required_grade(assessments, 80) == "N/A"


# Calculator ---------------------------------------------------------------------------


def test_calculator_delegates_to_grade_functions():
    # given
    calculator = gradetrack.Calculator(
        "Physics",
        [
            {"name": "Midterm", "grade": "70", "weight": 50},
            {"name": "Final", "grade": None, "weight": 50},
        ],
    )

    # then
    assert calculator.final_grade == "70.00"
    assert calculator.required_grade(80) == "90.00"
    assert calculator.total_weight == 100
    assert calculator.weights_sum_to(100)


def test_calculator_from_template_copies_names_and_weights_without_grades():
    # given
    template = gradetrack.Template(
        id="1",
        name="Physics 101",
        assessments=[
            {"name": "Midterm", "weight": 40},
            {"name": "Final", "weight": 60},
        ],
    )

    # when
    calculator = gradetrack.Calculator.from_template(template)

    # then
    assert calculator.name == "Physics 101"
    assert [a.name for a in calculator.assessments] == ["Midterm", "Final"]
    assert [a.weight for a in calculator.assessments] == [40, 60]
    assert all(a.grade is None for a in calculator.assessments)
    assert calculator.final_grade == "N/A"
    assert calculator.required_grade(75) == "75.00"


def test_calculator_from_template_with_custom_name():
    template = gradetrack.Template(id="1", name="Physics 101")
    calculator = gradetrack.Calculator.from_template(template, name="My Physics")
    assert calculator.name == "My Physics"
    assert len(calculator.assessments) == 0
