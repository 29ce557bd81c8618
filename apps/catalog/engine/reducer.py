"""
State transitions for the variant editor.

Every mutation is an action object run through ``VariantReducer.reduce``,
which returns a Transition: the next state plus which lists changed. The
reducer never notifies anyone and never raises for malformed input; a
rejected action comes back with the old state and the reasons in ``errors``.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from apps.catalog.conf import VariantSettings
from apps.catalog.engine.combination import (
    COMBINATION_FIELDS,
    PRICE_FIELDS,
    CombinationGenerator,
    VariantCombination,
)
from apps.catalog.engine.option import OptionStore, VariantOption
from apps.catalog.engine.pricing import selling_price, to_decimal
from apps.catalog.engine.session import EditSession
from apps.catalog.exceptions import (
    CombinationLimitExceeded,
    InvalidAmount,
    InvalidCombinationEdit,
    VariantError,
)


@dataclass(frozen=True)
class VariantState:
    store: OptionStore = field(default_factory=OptionStore)
    combinations: Tuple[VariantCombination, ...] = ()
    session: EditSession = field(default_factory=EditSession)

    @property
    def options(self) -> Tuple[VariantOption, ...]:
        return self.store.options


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class AddOption:
    name: str
    values: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RemoveOption:
    index: int


@dataclass(frozen=True)
class UpdateCombination:
    index: int
    field: str
    value: object


@dataclass(frozen=True)
class BulkUpdate:
    updates: Tuple[UpdateCombination, ...] = ()


@dataclass(frozen=True)
class ToggleBulkEdit:
    pass


@dataclass(frozen=True)
class ToggleRowEdit:
    index: int


@dataclass(frozen=True)
class Transition:
    state: VariantState
    applied: bool = False
    options_changed: bool = False
    combinations_changed: bool = False
    errors: Tuple[VariantError, ...] = ()


# =============================================================================
# Reducer
# =============================================================================

class VariantReducer:
    """
    Pure transition function over VariantState.

    Option changes regenerate the whole combination list; price edits
    recompute the row's selling price. ``max_combinations`` bounds the size
    of a regeneration and ``preserve_edits`` switches on carry-over of
    edited rows (off by default: regeneration resets every row).
    """

    def __init__(
        self,
        generator: Optional[CombinationGenerator] = None,
        max_combinations: Optional[int] = None,
        preserve_edits: Optional[bool] = None,
    ):
        self.generator = generator or CombinationGenerator()
        if max_combinations is None:
            max_combinations = VariantSettings.max_combinations()
        if preserve_edits is None:
            preserve_edits = VariantSettings.preserve_edits()
        self.max_combinations = max_combinations
        self.preserve_edits = preserve_edits

    def reduce(self, state: VariantState, action) -> Transition:
        if isinstance(action, AddOption):
            change = state.store.add_option(action.name, action.values)
        elif isinstance(action, RemoveOption):
            change = state.store.remove_option(action.index)
        elif isinstance(action, UpdateCombination):
            return self._update(state, (action,))
        elif isinstance(action, BulkUpdate):
            return self._update(state, action.updates)
        elif isinstance(action, ToggleBulkEdit):
            return self._with_session(state, state.session.toggle_bulk_edit())
        elif isinstance(action, ToggleRowEdit):
            if not _is_row(action.index, state.combinations):
                return Transition(state, errors=(
                    InvalidCombinationEdit(f"No combination at row {action.index!r}"),
                ))
            return self._with_session(state, state.session.toggle_row_edit(action.index))
        else:
            raise TypeError(f"Unknown variant action: {action!r}")

        if not change.applied:
            return Transition(state, errors=(change.error,))
        return self._regenerate(state, change.store)

    def _regenerate(self, state: VariantState, store: OptionStore) -> Transition:
        count = self.generator.count(store.options)
        if count > self.max_combinations:
            return Transition(state, errors=(
                CombinationLimitExceeded(count, self.max_combinations),
            ))

        combinations = self.generator.generate(store.options)
        if self.preserve_edits:
            combinations = self.generator.reconcile(state.combinations, combinations)

        next_state = VariantState(
            store=store,
            combinations=combinations,
            session=state.session.close_row(),
        )
        return Transition(
            next_state,
            applied=True,
            options_changed=True,
            combinations_changed=True,
        )

    def _update(self, state: VariantState, updates) -> Transition:
        combinations = list(state.combinations)
        errors = []
        updated = 0

        for update in updates:
            try:
                combinations[update.index] = apply_edit(
                    combinations, update.index, update.field, update.value
                )
            except InvalidCombinationEdit as exc:
                errors.append(exc)
            else:
                updated += 1

        if not updated:
            return Transition(state, errors=tuple(errors))

        next_state = VariantState(
            store=state.store,
            combinations=tuple(combinations),
            session=state.session,
        )
        return Transition(
            next_state,
            applied=True,
            combinations_changed=True,
            errors=tuple(errors),
        )

    @staticmethod
    def _with_session(state: VariantState, session: EditSession) -> Transition:
        if session == state.session:
            return Transition(state)
        next_state = VariantState(state.store, state.combinations, session)
        return Transition(next_state, applied=True)


def _is_row(index, combinations) -> bool:
    if not isinstance(index, int) or isinstance(index, bool):
        return False
    return 0 <= index < len(combinations)


def apply_edit(combinations, index, field_name, value) -> VariantCombination:
    """
    Return the row at ``index`` with ``field_name`` set to ``value``.

    Values are stored as given (no range checks). Inventory must be a whole
    number. Raises InvalidCombinationEdit for unknown rows, fields or values.
    """
    if field_name not in COMBINATION_FIELDS:
        raise InvalidCombinationEdit(f"Unknown combination field: {field_name!r}")
    if not _is_row(index, combinations):
        raise InvalidCombinationEdit(f"No combination at row {index!r}")

    try:
        amount = to_decimal(value)
    except InvalidAmount as exc:
        raise InvalidCombinationEdit(str(exc)) from exc

    if field_name == 'inventory':
        if amount != amount.to_integral_value():
            raise InvalidCombinationEdit(f"Inventory must be a whole number, got {value!r}")
        amount = int(amount)

    combo = combinations[index].with_values(**{field_name: amount})
    if field_name in PRICE_FIELDS:
        combo = combo.with_values(
            selling_price=selling_price(combo.mrp, combo.offer_percent)
        )
    return combo
