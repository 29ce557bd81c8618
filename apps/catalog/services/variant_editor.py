"""
Variant editor: the stateful side of the variants panel.

Holds the current VariantState, runs each operator action through the
reducer and tells the product form about every change.
"""
import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from apps.catalog.api.serializers import (
    CombinationUpdateSerializer,
    VariantsPayloadSerializer,
)
from apps.catalog.engine import (
    AddOption,
    BulkUpdate,
    EditSession,
    RemoveOption,
    ToggleBulkEdit,
    ToggleRowEdit,
    Transition,
    UpdateCombination,
    VariantCombination,
    VariantOption,
    VariantReducer,
    VariantState,
)
from apps.catalog.exceptions import CombinationLimitExceeded
from apps.catalog.signals import ChangeNotifier

logger = logging.getLogger(__name__)


class VariantEditor:
    """
    Options, combinations and edit mode for one product being created.

    Mutating methods return True when the state changed and False when the
    action was rejected; rejections are logged, never raised.

    Example:
        editor = VariantEditor(on_combinations_change=receiver)
        editor.add_option('Size UK', ['7', '8'])
        editor.add_option('Color', ['Red'])
        editor.toggle_row_edit(0)
        editor.update_combination(0, 'mrp', 1000)
    """

    def __init__(
        self,
        on_options_change=None,
        on_combinations_change=None,
        reducer: Optional[VariantReducer] = None,
    ):
        self.reducer = reducer or VariantReducer()
        self.notifier = ChangeNotifier()
        self.notifier.connect(on_options_change, on_combinations_change)
        self._state = VariantState()

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def state(self) -> VariantState:
        return self._state

    @property
    def options(self) -> Tuple[VariantOption, ...]:
        return self._state.options

    @property
    def combinations(self) -> Tuple[VariantCombination, ...]:
        return self._state.combinations

    @property
    def session(self) -> EditSession:
        return self._state.session

    def available_option_names(self) -> List[str]:
        return self._state.store.available_option_names()

    def editable_fields(self, index: int) -> FrozenSet[str]:
        return self._state.session.editable_fields(index)

    def rows(self) -> List[Dict[str, Any]]:
        """Display data for the combination table, one dict per row."""
        session = self._state.session
        return [
            {
                'index': index,
                'variant_name': combo.variant_name,
                'parts': combo.parts,
                'mrp': combo.mrp,
                'offer': f"{combo.offer_percent}%" if combo.is_on_sale else '-',
                'selling_price': combo.selling_price,
                'savings': combo.savings if combo.is_on_sale else None,
                'weight': combo.weight,
                'inventory': combo.inventory,
                'is_editing': session.is_editing(index),
                'editable_fields': sorted(session.editable_fields(index)),
            }
            for index, combo in enumerate(self._state.combinations)
        ]

    def payload(self) -> Dict[str, Any]:
        """Serialized options and combinations for the product form."""
        return VariantsPayloadSerializer({
            'options': self._state.options,
            'combinations': self._state.combinations,
        }).data

    # -------------------------------------------------------------------------
    # Options
    # -------------------------------------------------------------------------

    def add_option(self, name: str, values: Iterable[str]) -> bool:
        if isinstance(values, str):
            values = [values]
        return self.dispatch(AddOption(name, tuple(values or ()))).applied

    def remove_option(self, index: int) -> bool:
        return self.dispatch(RemoveOption(index)).applied

    # -------------------------------------------------------------------------
    # Combinations
    # -------------------------------------------------------------------------

    def update_combination(self, index: int, field: str, value) -> bool:
        return self.dispatch(UpdateCombination(index, field, value)).applied

    def bulk_update(self, updates: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Apply several combination edits as one change.

        Expected payload (one field per item):
            [
                {"index": 0, "field": "mrp", "value": 1000},
                {"index": 1, "field": "offer_percent", "value": 10}
            ]

        Invalid items are reported in ``errors``; the valid ones still apply.
        """
        actions = []
        errors = []

        for position, item in enumerate(updates):
            serializer = CombinationUpdateSerializer(data=item)
            if not serializer.is_valid():
                errors.append(f"Update {position}: {serializer.errors}")
                continue
            data = serializer.validated_data
            actions.append(UpdateCombination(data['index'], data['field'], data['value']))

        updated = 0
        if actions:
            transition = self.dispatch(BulkUpdate(tuple(actions)))
            errors.extend(str(error) for error in transition.errors)
            updated = len(actions) - len(transition.errors)

        return {
            'updated': updated,
            'errors': errors,
        }

    def apply_to_all(self, field: str, value) -> bool:
        """Set one field to the same value on every combination."""
        actions = tuple(
            UpdateCombination(index, field, value)
            for index in range(len(self._state.combinations))
        )
        return self.dispatch(BulkUpdate(actions)).applied

    # -------------------------------------------------------------------------
    # Edit mode
    # -------------------------------------------------------------------------

    def toggle_bulk_edit(self) -> bool:
        return self.dispatch(ToggleBulkEdit()).applied

    def toggle_row_edit(self, index: int) -> bool:
        return self.dispatch(ToggleRowEdit(index)).applied

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, action) -> Transition:
        transition = self.reducer.reduce(self._state, action)

        for error in transition.errors:
            level = logging.WARNING if isinstance(error, CombinationLimitExceeded) else logging.INFO
            logger.log(
                level,
                f"Rejected {type(action).__name__}: {error}",
                extra={
                    'code': error.code,
                    'option_count': len(self._state.options),
                    'combination_count': len(self._state.combinations),
                }
            )

        if transition.applied:
            self._state = transition.state
            self.notifier.notify(
                self,
                self._state,
                options_changed=transition.options_changed,
                combinations_changed=transition.combinations_changed,
            )
        return transition
