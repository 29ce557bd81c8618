"""
Variant editor settings.

Values come from Django settings with the defaults below as fallbacks, so a
project (or a test) can override any of them without touching the engine.
"""
from decimal import Decimal
from typing import Any, Dict, List

from django.conf import settings


DEFAULT_OPTION_CHOICES = ['Size UK', 'Size US', 'Color']

DEFAULT_PRESET_VALUES = {
    'Size UK': ['3', '4', '5', '6', '7', '8', '9', '10'],
    'Size US': ['3', '4', '5', '6', '7', '8', '9', '10'],
    'Color': ['Red', 'White', 'Blue', 'Black'],
}

DEFAULT_COMBINATION_DEFAULTS = {
    'mrp': 2160,
    'offer_percent': 0,
    'selling_price': 2160,
    'weight': 0,
    'inventory': 100,
}

DEFAULT_MAX_COMBINATIONS = 1000

DEFAULT_OFFER_CHOICES = ['0% Off', '10% Off', '12% Off', '50% Off']


class VariantSettings:
    """Read-only accessors for the variant editor configuration."""

    @classmethod
    def _get(cls, key: str, default: Any = None) -> Any:
        return getattr(settings, key, default)

    @classmethod
    def option_choices(cls) -> List[str]:
        """Closed set of option names offered by the selector."""
        return list(cls._get('VARIANT_OPTION_CHOICES', DEFAULT_OPTION_CHOICES))

    @classmethod
    def preset_values(cls) -> Dict[str, List[str]]:
        presets = cls._get('VARIANT_PRESET_VALUES', DEFAULT_PRESET_VALUES)
        return {name: list(values) for name, values in presets.items()}

    @classmethod
    def combination_defaults(cls) -> Dict[str, Any]:
        """
        Seed payload for freshly generated combinations.

        Money and weight come back as Decimal, inventory as int. Keys missing
        from the configured dict fall back to the built-in defaults.
        """
        configured = dict(DEFAULT_COMBINATION_DEFAULTS)
        configured.update(cls._get('VARIANT_COMBINATION_DEFAULTS', {}))
        return {
            'mrp': Decimal(str(configured['mrp'])),
            'offer_percent': Decimal(str(configured['offer_percent'])),
            'selling_price': Decimal(str(configured['selling_price'])),
            'weight': Decimal(str(configured['weight'])),
            'inventory': int(configured['inventory']),
        }

    @classmethod
    def max_combinations(cls) -> int:
        return int(cls._get('VARIANT_MAX_COMBINATIONS', DEFAULT_MAX_COMBINATIONS))

    @classmethod
    def preserve_edits(cls) -> bool:
        """Whether regeneration carries edited values over to matching rows."""
        return bool(cls._get('VARIANT_PRESERVE_EDITS', False))

    @classmethod
    def offer_choices(cls) -> List[str]:
        return list(cls._get('PRODUCT_OFFER_CHOICES', DEFAULT_OFFER_CHOICES))
