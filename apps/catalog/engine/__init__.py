"""
Variant engine for the product creation form.

Component hierarchy:
- pricing: selling price from MRP and offer percent
- VariantOption / OptionStore: named options and their distinct values
- VariantCombination / CombinationGenerator: cartesian product of option values
- EditSession: locked, row editing or bulk editing
- VariantReducer: pure state transitions tying the above together
"""

from .pricing import selling_price, savings, to_decimal
from .option import VariantOption, OptionStore, OptionChange
from .combination import (
    VariantCombination,
    CombinationGenerator,
    split_variant_name,
    decompose,
    VARIANT_NAME_SEPARATOR,
    COMBINATION_FIELDS,
)
from .session import EditMode, EditSession
from .reducer import (
    VariantState,
    VariantReducer,
    Transition,
    AddOption,
    RemoveOption,
    UpdateCombination,
    BulkUpdate,
    ToggleBulkEdit,
    ToggleRowEdit,
)

__all__ = [
    'selling_price',
    'savings',
    'to_decimal',
    'VariantOption',
    'OptionStore',
    'OptionChange',
    'VariantCombination',
    'CombinationGenerator',
    'split_variant_name',
    'decompose',
    'VARIANT_NAME_SEPARATOR',
    'COMBINATION_FIELDS',
    'EditMode',
    'EditSession',
    'VariantState',
    'VariantReducer',
    'Transition',
    'AddOption',
    'RemoveOption',
    'UpdateCombination',
    'BulkUpdate',
    'ToggleBulkEdit',
    'ToggleRowEdit',
]
