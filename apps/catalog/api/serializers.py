from rest_framework import serializers

from apps.catalog.engine import COMBINATION_FIELDS


# =============================================================================
# Variant Snapshot Serializers
# =============================================================================

class VariantOptionSerializer(serializers.Serializer):
    name = serializers.CharField(read_only=True)
    values = serializers.ListField(child=serializers.CharField(), read_only=True)


class VariantCombinationSerializer(serializers.Serializer):
    """Amounts are rendered as given; only the selling price is fixed to 2 places."""
    variant_name = serializers.CharField(read_only=True)
    parts = serializers.ListField(child=serializers.CharField(), read_only=True)
    mrp = serializers.DecimalField(max_digits=None, decimal_places=None, read_only=True)
    offer_percent = serializers.DecimalField(
        max_digits=None, decimal_places=None, read_only=True
    )
    selling_price = serializers.DecimalField(
        max_digits=None, decimal_places=2, read_only=True
    )
    weight = serializers.DecimalField(max_digits=None, decimal_places=None, read_only=True)
    inventory = serializers.IntegerField(read_only=True)


class VariantsPayloadSerializer(serializers.Serializer):
    """Both lists, as handed to the product form for its own submission."""
    options = VariantOptionSerializer(many=True, read_only=True)
    combinations = VariantCombinationSerializer(many=True, read_only=True)


# =============================================================================
# Combination Update Serializer
# =============================================================================

class FormDecimalField(serializers.DecimalField):
    """DecimalField that reads a blank string as zero, like a cleared number input."""

    def to_internal_value(self, data):
        if isinstance(data, str) and not data.strip():
            data = '0'
        return super().to_internal_value(data)


class CombinationUpdateSerializer(serializers.Serializer):
    """
    One item of a bulk update.

    Expected payload:
        {"index": 0, "field": "mrp", "value": 1000}
    """
    index = serializers.IntegerField(min_value=0)
    field = serializers.ChoiceField(choices=COMBINATION_FIELDS)
    value = FormDecimalField(max_digits=None, decimal_places=None)

    def validate(self, attrs):
        if attrs['field'] == 'inventory' and attrs['value'] != attrs['value'].to_integral_value():
            raise serializers.ValidationError({'value': 'Inventory must be a whole number.'})
        return attrs


# =============================================================================
# Product Pricing Serializer
# =============================================================================

class ProductPricingSerializer(serializers.Serializer):
    """
    Single-MRP pricing block of the product form.

    The selling price follows MRP and offer unless one was typed in, in
    which case the offer label is derived back from it.
    """
    mrp = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    offer = serializers.CharField(required=False, default='0% Off')
    selling_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )

    def validate_offer(self, value):
        from apps.catalog.services.product_pricing import ProductPricingService
        choices = ProductPricingService.offer_choices()
        if value not in choices:
            raise serializers.ValidationError(
                f"Offer must be one of: {', '.join(choices)}"
            )
        return value

    def validate(self, attrs):
        from apps.catalog.services.product_pricing import ProductPricingService
        mrp = attrs.get('mrp')
        typed_price = attrs.get('selling_price')

        if typed_price is not None:
            offer = ProductPricingService.offer_for_selling_price(mrp, typed_price)
            if offer is not None:
                attrs['offer'] = offer
        else:
            price = ProductPricingService.selling_price_for(mrp, attrs['offer'])
            if price is not None:
                attrs['selling_price'] = price
        return attrs
