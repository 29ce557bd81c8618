from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional


class EditMode(Enum):
    LOCKED = 'locked'
    ROW_EDITING = 'row_editing'
    BULK_EDITING = 'bulk_editing'


BULK_EDITABLE_FIELDS = frozenset({'mrp', 'offer_percent', 'weight'})

# Weight is only editable in bulk mode.
ROW_EDITABLE_FIELDS = frozenset({'mrp', 'offer_percent'})


@dataclass(frozen=True)
class EditSession:
    """
    Edit state of the combination table.

    A single tagged value: locked, editing one row, or bulk editing. Edits
    commit as they are typed, so leaving an edit state never rolls anything
    back; it only hides the inputs.
    """
    mode: EditMode = EditMode.LOCKED
    row: Optional[int] = None

    def __post_init__(self):
        if self.mode is EditMode.ROW_EDITING:
            if not isinstance(self.row, int) or self.row < 0:
                raise ValueError(f"Row editing needs a row index, got {self.row!r}")
        elif self.row is not None:
            raise ValueError(f"{self.mode.value} does not take a row index")

    @classmethod
    def locked(cls) -> 'EditSession':
        return cls()

    @classmethod
    def row_editing(cls, index: int) -> 'EditSession':
        return cls(EditMode.ROW_EDITING, index)

    @classmethod
    def bulk_editing(cls) -> 'EditSession':
        return cls(EditMode.BULK_EDITING)

    @property
    def is_locked(self) -> bool:
        return self.mode is EditMode.LOCKED

    @property
    def is_bulk_editing(self) -> bool:
        return self.mode is EditMode.BULK_EDITING

    def is_editing(self, index: int) -> bool:
        """True when the row at ``index`` shows inputs."""
        if self.mode is EditMode.BULK_EDITING:
            return True
        return self.mode is EditMode.ROW_EDITING and self.row == index

    def toggle_bulk_edit(self) -> 'EditSession':
        if self.mode is EditMode.BULK_EDITING:
            return EditSession.locked()
        # Entering bulk mode closes any open row.
        return EditSession.bulk_editing()

    def toggle_row_edit(self, index: int) -> 'EditSession':
        if self.mode is EditMode.BULK_EDITING:
            return self
        if self.mode is EditMode.ROW_EDITING and self.row == index:
            return EditSession.locked()
        return EditSession.row_editing(index)

    def close_row(self) -> 'EditSession':
        if self.mode is EditMode.ROW_EDITING:
            return EditSession.locked()
        return self

    def editable_fields(self, index: int) -> FrozenSet[str]:
        if self.mode is EditMode.BULK_EDITING:
            return BULK_EDITABLE_FIELDS
        if self.mode is EditMode.ROW_EDITING and self.row == index:
            return ROW_EDITABLE_FIELDS
        return frozenset()
