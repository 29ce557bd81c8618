from .serializers import (
    VariantOptionSerializer,
    VariantCombinationSerializer,
    VariantsPayloadSerializer,
    CombinationUpdateSerializer,
    ProductPricingSerializer,
)

__all__ = [
    'VariantOptionSerializer',
    'VariantCombinationSerializer',
    'VariantsPayloadSerializer',
    'CombinationUpdateSerializer',
    'ProductPricingSerializer',
]
