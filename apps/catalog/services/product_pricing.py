"""
Pricing for the product form's single MRP / offer / selling price block.

This is deliberately separate from the combination table: here a typed
selling price derives the offer back, in the table it never does.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from apps.catalog.conf import VariantSettings
from apps.catalog.engine.pricing import selling_price, to_decimal
from apps.catalog.exceptions import InvalidAmount


OFFER_SUFFIX = '% Off'


class ProductPricingService:
    """Stateless helpers behind the MRP, Offer and Selling Price fields."""

    @staticmethod
    def offer_choices() -> List[str]:
        return VariantSettings.offer_choices()

    @staticmethod
    def parse_offer(label: str) -> Decimal:
        """
        Read the percentage out of an offer label.

        Example:
            "10% Off" -> Decimal('10')
        """
        text = (label or '').replace(OFFER_SUFFIX, '').strip()
        return to_decimal(text)

    @staticmethod
    def format_offer(percent) -> str:
        return f"{to_decimal(percent).normalize():f}{OFFER_SUFFIX}"

    @staticmethod
    def _amount(value) -> Optional[Decimal]:
        """Value as Decimal, or None for anything missing, zero or unreadable."""
        if value is None:
            return None
        try:
            amount = to_decimal(value)
        except InvalidAmount:
            return None
        return amount or None

    @staticmethod
    def selling_price_for(mrp, offer_label) -> Optional[Decimal]:
        """
        Selling price for an MRP and offer label, to 2 places.

        Returns None when MRP or the offer is missing, leaving whatever the
        field already holds.
        """
        mrp = ProductPricingService._amount(mrp)
        if mrp is None or not offer_label:
            return None
        try:
            offer = ProductPricingService.parse_offer(offer_label)
        except InvalidAmount:
            return None
        return selling_price(mrp, offer)

    @staticmethod
    def offer_for_selling_price(mrp, selling_price) -> Optional[str]:
        """
        Derive the offer label from a manually typed selling price.

        The discount is rounded half up to a whole percent. A discount outside
        0-100 (price above MRP, or negative) falls back to "0% Off". Returns
        None when MRP or price is missing so the offer stays as it is.
        """
        mrp = ProductPricingService._amount(mrp)
        price = ProductPricingService._amount(selling_price)
        if mrp is None or price is None:
            return None

        discount = (mrp - price) / mrp * 100
        if 0 <= discount <= 100:
            rounded = discount.quantize(Decimal('1'), rounding=ROUND_HALF_UP)
            return ProductPricingService.format_offer(rounded)
        return ProductPricingService.format_offer(0)
