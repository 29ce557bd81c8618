"""
Tests for the combination table edit session.
"""
import pytest

from apps.catalog.engine import EditMode, EditSession


class TestEditSessionStates:
    """Test construction of the tagged state."""

    def test_starts_locked(self):
        session = EditSession()

        assert session.is_locked
        assert session.row is None

    def test_row_editing_needs_index(self):
        with pytest.raises(ValueError):
            EditSession(EditMode.ROW_EDITING)

    def test_row_index_only_for_row_editing(self):
        with pytest.raises(ValueError):
            EditSession(EditMode.BULK_EDITING, 2)
        with pytest.raises(ValueError):
            EditSession(EditMode.LOCKED, 0)

    def test_negative_row_rejected(self):
        with pytest.raises(ValueError):
            EditSession.row_editing(-1)


class TestToggles:
    """Test mode transitions."""

    def test_bulk_toggle_round_trip(self):
        session = EditSession.locked().toggle_bulk_edit()
        assert session.is_bulk_editing

        assert session.toggle_bulk_edit().is_locked

    def test_bulk_edit_closes_open_row(self):
        session = EditSession.row_editing(3).toggle_bulk_edit()

        assert session == EditSession.bulk_editing()
        assert session.row is None

    def test_row_toggle_round_trip(self):
        session = EditSession.locked().toggle_row_edit(1)
        assert session == EditSession.row_editing(1)

        assert session.toggle_row_edit(1).is_locked

    def test_new_row_closes_previous_row(self):
        session = EditSession.row_editing(0).toggle_row_edit(2)

        assert session.row == 2
        assert not session.is_editing(0)
        assert session.is_editing(2)

    def test_row_toggle_ignored_in_bulk_mode(self):
        session = EditSession.bulk_editing()

        assert session.toggle_row_edit(0) is session

    def test_close_row(self):
        assert EditSession.row_editing(4).close_row().is_locked
        assert EditSession.bulk_editing().close_row().is_bulk_editing


class TestEditableFields:
    """Test which inputs each mode exposes."""

    def test_locked_exposes_nothing(self):
        assert EditSession.locked().editable_fields(0) == frozenset()

    def test_bulk_exposes_weight_on_every_row(self):
        session = EditSession.bulk_editing()

        for index in range(3):
            assert session.editable_fields(index) == {'mrp', 'offer_percent', 'weight'}
            assert session.is_editing(index)

    def test_row_editing_has_no_weight(self):
        session = EditSession.row_editing(1)

        assert session.editable_fields(1) == {'mrp', 'offer_percent'}
        assert session.editable_fields(0) == frozenset()
