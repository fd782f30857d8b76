"""Tests for grid_css.core.types — the resolve-defaults step."""

import pytest
from grid_css.core.errors import GridTypeError
from grid_css.core.types import GridArea, GridDefaults, GridSpec, PlacementSpec


class TestGridSpecResolved:
    def test_all_defaults(self):
        assert GridSpec().resolved() == GridSpec(rows=('100%',), columns=('100%',), row_gap='0px', column_gap='0px')

    def test_keeps_given_fields(self):
        spec = GridSpec(rows=['1fr', '2fr'], row_gap='4px')
        resolved = spec.resolved()
        assert resolved.rows == ('1fr', '2fr')
        assert resolved.columns == ('100%',)
        assert resolved.row_gap == '4px'
        assert resolved.column_gap == '0px'

    def test_custom_defaults(self):
        defaults = GridDefaults(rows=('5px',), columns=('1fr', '1fr'), row_gap='2px', column_gap='3px')
        resolved = GridSpec(rows=['10px']).resolved(defaults)
        assert resolved.rows == ('10px',)
        assert resolved.columns == ('1fr', '1fr')
        assert resolved.column_gap == '3px'

    def test_does_not_validate(self):
        # Resolving and validating are separate steps.
        assert GridSpec(rows=['nonsense']).resolved().rows == ('nonsense',)

    def test_receiver_unchanged(self):
        spec = GridSpec()
        spec.resolved()
        assert spec == GridSpec()


class TestFromMapping:
    def test_known_keys(self):
        assert GridSpec.from_mapping({'rows': ['1fr']}) == GridSpec(rows=['1fr'])
        assert PlacementSpec.from_mapping({'start_row': 1}) == PlacementSpec(start_row=1)

    def test_unknown_keys(self):
        with pytest.raises(GridTypeError, match='columnGap'):
            GridSpec.from_mapping({'columnGap': '1px'})


class TestPlacementResolved:
    def test_end_defaults_to_start(self):
        assert PlacementSpec(start_row=1, start_column=2).resolved() == GridArea(1, 2, 1, 2)

    def test_explicit_ends(self):
        assert PlacementSpec(1, 3, 2, 4).resolved() == GridArea(1, 2, 3, 4)

    def test_truncates_toward_zero(self):
        area = PlacementSpec(start_row=1.9, start_column=2.1, end_row=3.9, end_column=4.9).resolved()
        assert area == GridArea(1, 2, 3, 4)

    def test_truncates_negative_toward_zero(self):
        assert PlacementSpec(start_row=-1.5, start_column=1).resolved() == GridArea(-1, 1, -1, 1)

    def test_zero_is_present(self):
        assert PlacementSpec(start_row=0, start_column=0).resolved() == GridArea(0, 0, 0, 0)

    def test_missing_start_row(self):
        assert PlacementSpec(start_column=1, end_row=3).resolved() is None

    def test_missing_start_column(self):
        assert PlacementSpec(start_row=1, end_column=4).resolved() is None

    def test_only_ends(self):
        assert PlacementSpec(end_row=3, end_column=4).resolved() is None


class TestGridSpecTracksStorage:
    def test_list_tracks_stored_as_tuple(self):
        spec = GridSpec(rows=['1fr', '2fr'], columns=['50%'])
        assert spec.rows == ('1fr', '2fr')
        assert spec.columns == ('50%',)

    def test_hashable_with_list_input(self):
        assert hash(GridSpec(rows=['1fr'])) == hash(GridSpec(rows=('1fr',)))
        assert isinstance(hash(GridSpec.from_mapping({'columns': ['1fr', '1fr']})), int)

    def test_caller_list_changes_do_not_leak(self):
        rows = ['1fr']
        spec = GridSpec(rows=rows)
        rows.append('2fr')
        assert spec.rows == ('1fr',)

    def test_bare_string_kept(self):
        assert GridSpec(rows='1fr').rows == '1fr'
