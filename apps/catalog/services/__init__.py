from .product_pricing import ProductPricingService
from .variant_editor import VariantEditor
from .option_selector import OptionSelector

__all__ = [
    'ProductPricingService',
    'VariantEditor',
    'OptionSelector',
]
