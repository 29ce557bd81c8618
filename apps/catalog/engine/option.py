from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional, Tuple

from apps.catalog.conf import VariantSettings
from apps.catalog.exceptions import InvalidOption, VariantError


def _distinct_values(values: Iterable) -> List[str]:
    """Strip values, drop blanks and duplicates, keep first-seen order."""
    cleaned = (str(value).strip() for value in values)
    return list(dict.fromkeys(value for value in cleaned if value))


@dataclass(frozen=True)
class VariantOption:
    """
    A named axis of variation with its distinct values.
    Examples: Size UK -> 7, 8, 9 / Color -> Red, Blue
    """
    name: str
    values: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'values', tuple(self.values))

    def __str__(self):
        return f"{self.name}: {', '.join(self.values)}"

    def merge(self, values: Iterable[str]) -> 'VariantOption':
        """Union ``values`` into this option, appending unseen ones in order."""
        merged = _distinct_values(list(self.values) + list(values))
        return VariantOption(self.name, tuple(merged))


class OptionChange(NamedTuple):
    """Outcome of an OptionStore mutation."""
    store: 'OptionStore'
    applied: bool
    error: Optional[VariantError] = None


@dataclass(frozen=True)
class OptionStore:
    """
    Ordered, immutable list of variant options.

    Mutations return an OptionChange holding the new store; a rejected
    mutation hands back the same store with ``applied=False``.
    """
    options: Tuple[VariantOption, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'options', tuple(self.options))

    def __len__(self):
        return len(self.options)

    def __iter__(self):
        return iter(self.options)

    def __getitem__(self, index):
        return self.options[index]

    @property
    def names(self) -> List[str]:
        return [option.name for option in self.options]

    def get(self, name: str) -> Optional[VariantOption]:
        for option in self.options:
            if option.name == name:
                return option
        return None

    def add_option(self, name, values) -> OptionChange:
        """
        Add an option, or union ``values`` into the option of that name.

        Empty names and empty value selections are rejected.
        """
        name = (name or '').strip()
        values = _distinct_values(values or [])

        if not name:
            return OptionChange(self, False, InvalidOption('Option name is required'))
        if not values:
            return OptionChange(
                self, False, InvalidOption(f"Option '{name}' needs at least one value")
            )

        if self.get(name) is None:
            options = self.options + (VariantOption(name, tuple(values)),)
        else:
            options = tuple(
                option.merge(values) if option.name == name else option
                for option in self.options
            )
        return OptionChange(OptionStore(options), True)

    def remove_option(self, index: int) -> OptionChange:
        """Drop the whole option at ``index``."""
        if not isinstance(index, int) or isinstance(index, bool) \
                or not 0 <= index < len(self.options):
            return OptionChange(
                self, False, InvalidOption(f"No option at position {index!r}")
            )
        options = self.options[:index] + self.options[index + 1:]
        return OptionChange(OptionStore(options), True)

    def available_option_names(self, choices: Optional[Iterable[str]] = None) -> List[str]:
        """Configured option names that are not in use yet."""
        if choices is None:
            choices = VariantSettings.option_choices()
        used = set(self.names)
        return [choice for choice in choices if choice not in used]
