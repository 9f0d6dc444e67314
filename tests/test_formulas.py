"""Tests for the shape formula table and text-input evaluation."""

import math

import pytest

from areawiz.core.formulas import (
    FORMULAS,
    INVALID_INPUT_TEXT,
    MISSING_INPUT_TEXT,
    compute_area,
    evaluate,
    format_area,
    formula_for,
    parse_inputs,
)
from areawiz.core.shapes import SELECTABLE_SHAPES, ShapeKind, coerce_shape_kind, shape_index
from areawiz.utils.errors import (
    AreaArityError,
    AwValidationError,
    InvalidInputError,
    MissingInputError,
    UnknownShapeError,
)


class TestFormulaTable:
    def test_every_selectable_shape_has_a_formula(self):
        assert set(FORMULAS) == set(SELECTABLE_SHAPES)
        assert ShapeKind.LOADING not in FORMULAS

    def test_labels_in_order(self):
        assert FORMULAS[ShapeKind.TRAPEZOID].input_labels == ("Base A", "Base B", "Height")
        assert FORMULAS[ShapeKind.CIRCLE].input_labels == ("Radius",)
        assert FORMULAS[ShapeKind.BOX].display_name == "BOX (Surface Area)"

    def test_loading_has_no_formula(self):
        with pytest.raises(UnknownShapeError):
            formula_for(ShapeKind.LOADING)


class TestComputeArea:
    @pytest.mark.parametrize(
        "kind, values, expected",
        [
            (ShapeKind.TRIANGLE, [4, 5], 10.0),
            (ShapeKind.RECTANGLE, [3, 4], 12.0),
            (ShapeKind.CIRCLE, [2], 4 * math.pi),
            (ShapeKind.TRAPEZOID, [2, 4, 3], 9.0),
            (ShapeKind.BOX, [1, 2, 3], 22.0),
            (ShapeKind.CYLINDER, [1, 1], 4 * math.pi),
            (ShapeKind.CONE, [3, 4], 24 * math.pi),
        ],
    )
    def test_known_areas(self, kind, values, expected):
        assert compute_area(kind, values) == pytest.approx(expected)

    def test_two_decimal_formatting(self):
        assert format_area(compute_area(ShapeKind.CIRCLE, [2])) == "12.57"
        assert format_area(compute_area(ShapeKind.RECTANGLE, [3, 4])) == "12.00"
        assert format_area(compute_area(ShapeKind.CONE, [3, 4])) == "75.40"

    def test_wrong_arity_is_rejected(self):
        with pytest.raises(AreaArityError):
            compute_area(ShapeKind.RECTANGLE, [3])
        with pytest.raises(AreaArityError):
            compute_area(ShapeKind.CIRCLE, [1, 2])

    def test_loading_is_rejected(self):
        with pytest.raises(UnknownShapeError):
            compute_area(ShapeKind.LOADING, [])

    def test_negative_values_are_computed_as_is(self):
        assert compute_area(ShapeKind.RECTANGLE, [-3, 4]) == pytest.approx(-12.0)
        assert compute_area(ShapeKind.TRIANGLE, [0, 4]) == 0.0


class TestParseInputs:
    def test_parses_with_whitespace(self):
        assert parse_inputs([" 3 ", "4.5"]) == [3.0, 4.5]

    def test_empty_field_is_missing(self):
        with pytest.raises(MissingInputError) as ei:
            parse_inputs(["3", "  "], ("Length", "Width"))
        assert ei.value.index == 1
        assert ei.value.label == "Width"
        assert "Width" in str(ei.value)

    def test_non_numeric_is_invalid(self):
        with pytest.raises(InvalidInputError) as ei:
            parse_inputs(["abc"], ("Radius",))
        assert ei.value.text == "abc"

    def test_non_finite_is_invalid(self):
        with pytest.raises(InvalidInputError):
            parse_inputs(["nan"])
        with pytest.raises(InvalidInputError):
            parse_inputs(["inf"])

    def test_first_offending_field_decides(self):
        with pytest.raises(InvalidInputError):
            parse_inputs(["abc", ""])
        with pytest.raises(MissingInputError):
            parse_inputs(["", "abc"])

    def test_both_are_validation_errors(self):
        assert issubclass(MissingInputError, AwValidationError)
        assert issubclass(InvalidInputError, AwValidationError)


class TestEvaluate:
    def test_ok_result(self):
        res = evaluate(ShapeKind.RECTANGLE, ["3", "4"])
        assert res.ok
        assert res.text == "12.00"
        assert res.value == pytest.approx(12.0)

    def test_missing_never_yields_a_number(self):
        res = evaluate(ShapeKind.TRAPEZOID, ["2", "", "3"])
        assert res.status == "missing"
        assert res.text == MISSING_INPUT_TEXT
        assert res.value is None

    def test_invalid(self):
        res = evaluate(ShapeKind.CIRCLE, ["abc"])
        assert res.status == "invalid"
        assert res.text == INVALID_INPUT_TEXT
        assert res.value is None

    def test_negative_input_formats_negative_area(self):
        assert evaluate(ShapeKind.RECTANGLE, ["-3", "4"]).text == "-12.00"


class TestShapeKind:
    def test_selectable_order(self):
        assert SELECTABLE_SHAPES[0] is ShapeKind.TRIANGLE
        assert SELECTABLE_SHAPES[-1] is ShapeKind.CONE
        assert len(SELECTABLE_SHAPES) == 7

    def test_coerce(self):
        assert coerce_shape_kind("Cone") is ShapeKind.CONE
        assert coerce_shape_kind(ShapeKind.BOX) is ShapeKind.BOX
        assert coerce_shape_kind("loading") is ShapeKind.TRIANGLE
        assert coerce_shape_kind(None, ShapeKind.CIRCLE) is ShapeKind.CIRCLE

    def test_index(self):
        assert shape_index(ShapeKind.TRIANGLE) == 0
        assert shape_index(ShapeKind.LOADING) == -1
