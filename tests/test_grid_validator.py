"""Tests for grid_css.validators.grid — whole-grid and placement validation."""

import pytest
from grid_css.core.errors import GridFormatError, GridRangeError, GridTypeError
from grid_css.core.types import GridSpec, PlacementSpec
from grid_css.validators.grid import GridValidator


class TestValidateAllParams:
    def test_valid_spec(self):
        spec = GridSpec(rows=['1fr', '2fr'], columns=['50%'], row_gap='10px', column_gap='5px')
        assert GridValidator().validate_all_params(spec) is spec

    def test_mapping_input(self):
        result = GridValidator().validate_all_params({'rows': ['1fr'], 'column_gap': '4px'})
        assert result == GridSpec(rows=['1fr'], column_gap='4px')

    def test_omitted_fields_skipped(self):
        GridValidator().validate_all_params(GridSpec())

    def test_unknown_key(self):
        with pytest.raises(GridTypeError, match='rowGap'):
            GridValidator().validate_all_params({'rowGap': '1px'})

    def test_not_a_mapping(self):
        with pytest.raises(GridTypeError):
            GridValidator().validate_all_params(['1fr'])

    def test_bad_rows(self):
        with pytest.raises(GridFormatError, match='Row track'):
            GridValidator().validate_all_params({'rows': ['1em']})

    def test_bad_columns(self):
        with pytest.raises(GridRangeError, match='Column track'):
            GridValidator().validate_all_params({'columns': ['-1fr']})

    def test_gap_must_be_single_value(self):
        with pytest.raises(GridTypeError, match='Row gap'):
            GridValidator().validate_all_params({'row_gap': ['1px']})

    def test_fail_fast_order(self):
        # Every field is wrong; rows are checked first.
        spec = GridSpec(rows=['1em'], columns=['-1px'], row_gap=3, column_gap='-1px')
        with pytest.raises(GridFormatError, match='Row track'):
            GridValidator().validate_all_params(spec)

    def test_revalidation_is_idempotent(self):
        rows = ['1fr', '2fr']
        spec = GridSpec(rows=rows, columns=['100%'], row_gap='0px', column_gap='0px')
        v = GridValidator()
        for _ in range(3):
            v.validate_all_params(spec)
        assert spec == GridSpec(rows=['1fr', '2fr'], columns=['100%'], row_gap='0px', column_gap='0px')
        assert rows == ['1fr', '2fr']


class TestValidatePositions:
    def test_pass_through(self):
        spec = PlacementSpec(start_row=1, start_column=2.5)
        assert GridValidator().validate_positions(spec) is spec

    def test_no_defaulting(self):
        result = GridValidator().validate_positions({'start_row': 1, 'start_column': 2})
        assert result.end_row is None
        assert result.end_column is None

    def test_empty(self):
        assert GridValidator().validate_positions({}) == PlacementSpec()

    @pytest.mark.parametrize('field', ['start_row', 'end_row', 'start_column', 'end_column'])
    def test_non_numeric(self, field: str) -> None:
        with pytest.raises(GridTypeError, match=field):
            GridValidator().validate_positions({field: '1'})

    def test_bool_rejected(self):
        with pytest.raises(GridTypeError):
            GridValidator().validate_positions({'start_row': True})

    def test_nan_rejected(self):
        with pytest.raises(GridTypeError):
            GridValidator().validate_positions({'start_row': float('nan')})

    def test_unknown_key(self):
        with pytest.raises(GridTypeError):
            GridValidator().validate_positions({'startRow': 1})


class TestIsString:
    def test_is_string(self):
        assert GridValidator.is_string('#app')
        assert not GridValidator.is_string(None)
