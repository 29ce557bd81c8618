"""
Exceptions raised inside the variant engine.

None of these reach the operator: the reducer returns them as rejection
reasons and the editor logs them and leaves its state unchanged.
"""


class VariantError(Exception):
    """Base class for variant engine errors."""
    code = 'VARIANT_ERROR'


class InvalidOption(VariantError):
    """An option mutation was malformed (empty name, no values, bad index)."""
    code = 'INVALID_OPTION'


class CombinationLimitExceeded(VariantError):
    """The mutation would expand into more combinations than allowed."""
    code = 'COMBINATION_LIMIT_EXCEEDED'

    def __init__(self, count, limit):
        self.count = count
        self.limit = limit
        super().__init__(
            f"{count} combinations exceed the limit of {limit}"
        )


class InvalidCombinationEdit(VariantError):
    """A combination edit named an unknown field or row, or a bad number."""
    code = 'INVALID_COMBINATION_EDIT'


class InvalidAmount(VariantError, ValueError):
    """A numeric input could not be read as a finite decimal."""
    code = 'INVALID_AMOUNT'
