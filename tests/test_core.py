"""
Unit tests for the grid type and input validation.
"""

import pytest
import numpy as np
import pandas as pd
import sys
import os

# Add project to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from newsvendor_profit.core import (
    ProfitCalculatorError,
    InvalidArgumentError,
    DimensionMismatchError,
    EmptyInputError,
    ProfitGrid,
    validate_quantity,
    as_quantity_array,
    as_probability_array,
)


@pytest.fixture
def small_grid():
    return ProfitGrid(
        values=[[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
        orders=[10, 20],
        demands=[5, 15, 25],
    )


class TestExceptions:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize("error", [InvalidArgumentError, DimensionMismatchError, EmptyInputError])
    def test_hierarchy(self, error):
        assert issubclass(error, ProfitCalculatorError)
        assert issubclass(error, ValueError)


class TestValidation:
    """Tests for quantity and probability coercion."""

    def test_validate_quantity(self):
        assert validate_quantity(5) == 5
        assert validate_quantity(np.int32(7)) == 7
        assert validate_quantity(3.0) == 3
        assert isinstance(validate_quantity(np.int64(1)), int)

    @pytest.mark.parametrize("value", [-1, 1.5, False, "3", float("nan")])
    def test_validate_quantity_rejects(self, value):
        with pytest.raises(InvalidArgumentError):
            validate_quantity(value)

    def test_as_quantity_array(self):
        arr = as_quantity_array([100, 150.0, 200])
        assert arr.dtype == np.int64
        np.testing.assert_array_equal(arr, [100, 150, 200])

    def test_as_quantity_array_empty(self):
        arr = as_quantity_array([])
        assert arr.shape == (0,)
        assert arr.dtype == np.int64

    @pytest.mark.parametrize("values", [[1, -2], [1.5], [[1, 2]], [True, False], ["a"]])
    def test_as_quantity_array_rejects(self, values):
        with pytest.raises(InvalidArgumentError):
            as_quantity_array(values)

    def test_as_quantity_array_copies(self):
        source = np.array([1, 2, 3])
        arr = as_quantity_array(source)
        arr[0] = 99
        assert source[0] == 1

    @pytest.mark.parametrize("value", [2**63, 2**70])
    def test_validate_quantity_rejects_beyond_int64(self, value):
        with pytest.raises(InvalidArgumentError):
            validate_quantity(value)

    @pytest.mark.parametrize("values", [[2**63], [1, 2**70], np.array([2**63], dtype=np.uint64), [2.0**63]])
    def test_as_quantity_array_rejects_beyond_int64(self, values):
        with pytest.raises(InvalidArgumentError):
            as_quantity_array(values)

    def test_as_quantity_array_accepts_int64_max(self):
        arr = as_quantity_array([2**63 - 1])
        assert arr.dtype == np.int64
        assert arr[0] == 2**63 - 1

    def test_as_probability_array(self):
        arr = as_probability_array([0.25, 0.75])
        assert arr.dtype == np.float64
        with pytest.raises(InvalidArgumentError):
            as_probability_array(["x", 0.5])
        with pytest.raises(InvalidArgumentError):
            as_probability_array([[0.5, 0.5]])

    @pytest.mark.parametrize("values", [["0.5", "0.5"], ["0.25", 0.75], [True, False]])
    def test_as_probability_array_rejects_non_numeric(self, values):
        with pytest.raises(InvalidArgumentError):
            as_probability_array(values)


class TestProfitGrid:
    """Tests for ProfitGrid."""

    def test_shape_and_access(self, small_grid):
        assert small_grid.shape == (2, 3)
        assert len(small_grid) == 2
        assert small_grid[1, 2] == 6.0
        np.testing.assert_array_equal(small_grid.row(0), [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(small_grid.column(1), [2.0, 5.0])
        assert small_grid.tolist() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    def test_iterates_rows(self, small_grid):
        rows = [list(row) for row in small_grid]
        assert rows == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    def test_ragged_rows_rejected(self):
        with pytest.raises((DimensionMismatchError, ValueError)):
            ProfitGrid(values=[[1.0, 2.0], [3.0]], orders=[1, 2], demands=[1, 2])

    def test_label_mismatch_rejected(self):
        with pytest.raises(DimensionMismatchError):
            ProfitGrid(values=[[1.0, 2.0]], orders=[1, 2], demands=[1, 2])
        with pytest.raises(DimensionMismatchError):
            ProfitGrid(values=[1.0, 2.0], orders=[1], demands=[1, 2])

    def test_immutable(self, small_grid):
        with pytest.raises(ValueError):
            small_grid.values[0, 0] = 10.0
        with pytest.raises(ValueError):
            small_grid.orders[0] = 1
        with pytest.raises(AttributeError):
            small_grid.values = np.zeros((2, 3))

    def test_owns_its_storage(self):
        source = np.ones((1, 2))
        grid = ProfitGrid(values=source, orders=[1], demands=[1, 2])
        source[0, 0] = 5.0
        assert grid[0, 0] == 1.0

    def test_to_frame(self, small_grid):
        df = small_grid.to_frame()
        assert isinstance(df, pd.DataFrame)
        assert df.index.name == "order"
        assert df.columns.name == "demand"
        assert list(df.index) == [10, 20]
        assert list(df.columns) == [5, 15, 25]
        assert df.loc[20, 15] == 5.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
