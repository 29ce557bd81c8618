import dataclasses
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from apps.catalog.conf import VariantSettings
from apps.catalog.engine.option import VariantOption
from apps.catalog.engine import pricing

logger = logging.getLogger(__name__)


VARIANT_NAME_SEPARATOR = ' + '

# Fields an operator may set on a combination.
COMBINATION_FIELDS = ('mrp', 'offer_percent', 'selling_price', 'weight', 'inventory')

# Changing one of these recomputes the selling price.
PRICE_FIELDS = ('mrp', 'offer_percent')


@dataclass(frozen=True)
class VariantCombination:
    """
    One purchasable SKU: exactly one value picked from every option.
    The variant name is the key, e.g. "Size UK 7 + Color Red".
    """
    variant_name: str
    mrp: Decimal = Decimal('2160')
    offer_percent: Decimal = Decimal('0')
    selling_price: Decimal = Decimal('2160')
    weight: Decimal = Decimal('0')
    inventory: int = 100

    def __str__(self):
        return self.variant_name

    @property
    def parts(self) -> List[str]:
        return split_variant_name(self.variant_name)

    @property
    def is_on_sale(self) -> bool:
        return self.offer_percent > 0

    @property
    def savings(self) -> Decimal:
        return pricing.savings(self.mrp, self.offer_percent)

    def with_values(self, **changes) -> 'VariantCombination':
        return dataclasses.replace(self, **changes)

    def edited_values(self) -> Dict[str, object]:
        return {name: getattr(self, name) for name in COMBINATION_FIELDS}


def split_variant_name(variant_name: str) -> List[str]:
    """Split a variant name into its "<option> <value>" parts."""
    if not variant_name:
        return []
    return variant_name.split(VARIANT_NAME_SEPARATOR)


def decompose(variant_name: str, options: Sequence[VariantOption]) -> Dict[str, str]:
    """
    Map a variant name back to {option name: value}, in declaration order.

    Raises ValueError when the name was not generated from ``options``.
    """
    parts = split_variant_name(variant_name)
    if len(parts) != len(options):
        raise ValueError(
            f"'{variant_name}' has {len(parts)} parts for {len(options)} options"
        )

    result = {}
    for part, option in zip(parts, options):
        prefix = f"{option.name} "
        value = part[len(prefix):]
        if not part.startswith(prefix) or value not in option.values:
            raise ValueError(f"'{part}' is not a value of option '{option.name}'")
        result[option.name] = value
    return result


class CombinationGenerator:
    """
    Expands options into their full cartesian product of combinations.

    The first option varies slowest. Every combination starts from the same
    seed payload; nothing is computed from earlier combinations unless
    ``reconcile`` is asked to carry edits over.
    """

    def __init__(self, defaults: Optional[Dict[str, object]] = None):
        if defaults is None:
            defaults = VariantSettings.combination_defaults()
        self.defaults = dict(defaults)

    @staticmethod
    def count(options: Sequence[VariantOption]) -> int:
        """Number of combinations ``generate`` would produce."""
        if not options:
            return 0
        total = 1
        for option in options:
            total *= len(option.values)
        return total

    def generate(self, options: Iterable[VariantOption]) -> Tuple[VariantCombination, ...]:
        options = tuple(options)
        if not options:
            return ()

        names = []

        def expand(depth, path):
            if depth == len(options):
                names.append(VARIANT_NAME_SEPARATOR.join(path))
                return
            option = options[depth]
            for value in option.values:
                expand(depth + 1, path + [f"{option.name} {value}"])

        expand(0, [])

        logger.debug("Generated %d combinations from %d options", len(names), len(options))
        return tuple(
            VariantCombination(variant_name=name, **self.defaults)
            for name in names
        )

    @staticmethod
    def reconcile(
        previous: Sequence[VariantCombination],
        regenerated: Sequence[VariantCombination],
    ) -> Tuple[VariantCombination, ...]:
        """
        Copy edited values from ``previous`` onto matching regenerated rows.

        A row matches its exact namesake first, otherwise the first previous
        row whose parts are a subset or superset of its own (an option was
        added or removed). Rows without a match keep the seed payload.
        """
        by_name = {combo.variant_name: combo for combo in previous}
        carried = 0
        result = []

        for combo in regenerated:
            source = by_name.get(combo.variant_name)
            if source is None:
                parts = set(combo.parts)
                for old in previous:
                    old_parts = set(old.parts)
                    if parts <= old_parts or old_parts <= parts:
                        source = old
                        break

            if source is None:
                result.append(combo)
            else:
                result.append(combo.with_values(**source.edited_values()))
                carried += 1

        logger.debug("Carried edits over to %d of %d combinations", carried, len(result))
        return tuple(result)
