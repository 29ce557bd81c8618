"""
Tests for CombinationGenerator and variant name helpers.

Property tests cover the cartesian product invariants: row count, unique
names, and names that decompose back into one value per option.
"""
from decimal import Decimal
from math import prod

import pytest
from hypothesis import given, strategies as st

from apps.catalog.engine import (
    CombinationGenerator,
    VariantCombination,
    VariantOption,
    decompose,
    split_variant_name,
)


DEFAULTS = {
    'mrp': Decimal('2160'),
    'offer_percent': Decimal('0'),
    'selling_price': Decimal('2160'),
    'weight': Decimal('0'),
    'inventory': 100,
}


@st.composite
def option_lists(draw):
    """Up to three options with distinct names and distinct values."""
    names = draw(st.lists(
        st.sampled_from(['Size UK', 'Size US', 'Color', 'Material']),
        unique=True, max_size=3,
    ))
    return tuple(
        VariantOption(name, tuple(draw(st.lists(
            st.text(alphabet='abcdefgh0123456789', min_size=1, max_size=4),
            unique=True, min_size=0, max_size=4,
        ))))
        for name in names
    )


@pytest.fixture
def generator():
    return CombinationGenerator(DEFAULTS)


class TestGenerate:
    """Test cartesian expansion."""

    def test_size_and_color_scenario(self, generator, size_color_options):
        combos = generator.generate(size_color_options)

        assert [c.variant_name for c in combos] == [
            'Size UK 7 + Color Red',
            'Size UK 8 + Color Red',
        ]
        for combo in combos:
            assert combo.mrp == Decimal('2160')
            assert combo.offer_percent == 0
            assert combo.selling_price == Decimal('2160')
            assert combo.weight == 0
            assert combo.inventory == 100

    def test_first_option_varies_slowest(self, generator):
        options = (
            VariantOption('Size UK', ('7', '8')),
            VariantOption('Color', ('Red', 'Blue')),
        )

        names = [c.variant_name for c in generator.generate(options)]

        assert names == [
            'Size UK 7 + Color Red',
            'Size UK 7 + Color Blue',
            'Size UK 8 + Color Red',
            'Size UK 8 + Color Blue',
        ]

    def test_single_option(self, generator):
        combos = generator.generate([VariantOption('Color', ('Red', 'Blue'))])

        assert [c.variant_name for c in combos] == ['Color Red', 'Color Blue']

    def test_no_options_gives_no_combinations(self, generator):
        assert generator.generate([]) == ()

    def test_option_without_values_empties_the_product(self, generator):
        options = (VariantOption('Size UK', ('7',)), VariantOption('Color', ()))

        assert generator.generate(options) == ()
        assert generator.count(options) == 0

    def test_defaults_come_from_settings(self, settings, size_color_options):
        settings.VARIANT_COMBINATION_DEFAULTS = {'mrp': 999, 'selling_price': 999}

        combos = CombinationGenerator().generate(size_color_options)

        assert combos[0].mrp == Decimal('999')
        assert combos[0].selling_price == Decimal('999')
        assert combos[0].inventory == 100

    @given(options=option_lists())
    def test_length_is_product_of_value_counts(self, options):
        combos = CombinationGenerator(DEFAULTS).generate(options)

        expected = prod(len(o.values) for o in options) if options else 0
        assert len(combos) == expected
        assert CombinationGenerator.count(options) == expected

    @given(options=option_lists())
    def test_names_are_unique_and_decompose(self, options):
        combos = CombinationGenerator(DEFAULTS).generate(options)
        names = [c.variant_name for c in combos]

        assert len(set(names)) == len(names)
        for name in names:
            picked = decompose(name, options)
            assert list(picked) == [o.name for o in options]
            for option in options:
                assert picked[option.name] in option.values


class TestVariantNames:
    """Test splitting and decomposing variant names."""

    def test_split(self):
        assert split_variant_name('Size UK 7 + Color Red') == ['Size UK 7', 'Color Red']
        assert split_variant_name('') == []

    def test_decompose(self, size_color_options):
        assert decompose('Size UK 8 + Color Red', size_color_options) == {
            'Size UK': '8',
            'Color': 'Red',
        }

    @pytest.mark.parametrize('name', [
        'Size UK 8',
        'Size UK 9 + Color Red',
        'Color Red + Size UK 8',
    ])
    def test_decompose_rejects_foreign_names(self, size_color_options, name):
        with pytest.raises(ValueError):
            decompose(name, size_color_options)


class TestReconcile:
    """Test carrying edits over to regenerated combinations."""

    def test_exact_name_keeps_edits(self, generator, size_color_options):
        edited = VariantCombination('Size UK 7 + Color Red', mrp=Decimal('1000'),
                                    offer_percent=Decimal('10'),
                                    selling_price=Decimal('900.00'))
        regenerated = generator.generate(size_color_options)

        result = CombinationGenerator.reconcile([edited], regenerated)

        assert result[0].selling_price == Decimal('900.00')
        assert result[1].mrp == Decimal('2160')

    def test_added_option_inherits_from_sub_key(self, generator):
        edited = VariantCombination('Size UK 7', mrp=Decimal('500'), weight=Decimal('1.5'))
        regenerated = generator.generate((
            VariantOption('Size UK', ('7', '8')),
            VariantOption('Color', ('Red', 'Blue')),
        ))

        result = CombinationGenerator.reconcile([edited], regenerated)

        assert [c.mrp for c in result] == [
            Decimal('500'), Decimal('500'), Decimal('2160'), Decimal('2160'),
        ]
        assert result[1].weight == Decimal('1.5')

    def test_removed_option_inherits_from_super_key(self, generator):
        edited = VariantCombination('Size UK 8 + Color Red', inventory=7)
        regenerated = generator.generate((VariantOption('Size UK', ('7', '8')),))

        result = CombinationGenerator.reconcile([edited], regenerated)

        assert [c.inventory for c in result] == [100, 7]
        assert result[1].variant_name == 'Size UK 8'


class TestVariantCombination:
    """Test VariantCombination helpers."""

    def test_parts(self):
        combo = VariantCombination('Size UK 7 + Color Red')

        assert combo.parts == ['Size UK 7', 'Color Red']
        assert str(combo) == 'Size UK 7 + Color Red'

    def test_savings(self):
        combo = VariantCombination('Color Red', mrp=Decimal('1000'),
                                   offer_percent=Decimal('10'))

        assert combo.is_on_sale
        assert combo.savings == Decimal('100.00')

    def test_is_frozen(self):
        combo = VariantCombination('Color Red')

        with pytest.raises(AttributeError):
            combo.mrp = Decimal('1')
