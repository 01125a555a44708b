import numpy as np
import pytest  # pyright: ignore

import gradetrack

# Assessment ---------------------------------------------------------------------------


def test_coerce_from_mapping_with_missing_keys():
    # when
    a = gradetrack.Assessment.coerce({"weight": "0.5"})

    # then
    assert a == gradetrack.Assessment(grade=None, weight="0.5", name=None)


def test_coerce_returns_assessments_unchanged():
    a = gradetrack.Assessment(grade="1/2", weight=1, name="quiz")
    assert gradetrack.Assessment.coerce(a) is a


def test_coerce_raises_on_unexpected_type():
    with pytest.raises(TypeError):
        gradetrack.Assessment.coerce(42)


def test_graded_and_remaining_flags():
    graded = gradetrack.Assessment(grade="17/20", weight="1")
    remaining = gradetrack.Assessment(grade=None, weight="1")
    unweighted = gradetrack.Assessment(grade="90", weight=None)

    assert graded.is_graded and not graded.is_remaining
    assert remaining.is_remaining and not remaining.is_graded
    assert not unweighted.is_graded and not unweighted.is_remaining


# Assessments --------------------------------------------------------------------------


def test_graded_and_remaining_partition_weighted_assessments():
    # given
    assessments = gradetrack.Assessments(
        [
            {"name": "hw", "grade": "90", "weight": 10},
            {"name": "midterm", "grade": "", "weight": 40},
            {"name": "bonus", "grade": "5", "weight": None},
            {"name": "final", "grade": "oops", "weight": 50},
        ]
    )

    # then
    assert [a.name for a in assessments.graded()] == ["hw"]
    assert [a.name for a in assessments.remaining()] == ["midterm", "final"]
    assert len(assessments.weighted()) == 3


def test_to_frame_has_one_row_per_assessment():
    # given
    assessments = gradetrack.Assessments(
        [
            {"name": "hw", "grade": "9/10", "weight": 0.25},
            {"name": "final", "grade": None, "weight": 0.75},
        ]
    )

    # when
    table = assessments.to_frame()

    # then
    assert list(table.columns) == [
        "name",
        "grade",
        "weight",
        "percentage",
        "contribution",
    ]
    assert table.loc[0, "percentage"] == 90.0
    assert table.loc[0, "contribution"] == 22.5
    assert np.isnan(table.loc[1, "percentage"])
    assert np.isnan(table.loc[1, "contribution"])
    assert table.loc[1, "weight"] == 0.75


def test_to_frame_of_empty_assessments_has_columns():
    table = gradetrack.Assessments([]).to_frame()
    assert len(table) == 0
    assert "percentage" in table.columns


# weight helpers -----------------------------------------------------------------------


def test_total_weight_skips_unusable_weights():
    assessments = [
        {"grade": None, "weight": "30"},
        {"grade": None, "weight": 20},
        {"grade": None, "weight": ""},
        {"grade": None, "weight": "heavy"},
    ]
    assert gradetrack.total_weight(assessments) == 50


def test_weights_sum_to():
    assessments = [{"weight": 0.1}, {"weight": 0.2}, {"weight": 0.7}]
    assert gradetrack.weights_sum_to(assessments, expected=1)
    assert not gradetrack.weights_sum_to(assessments)
