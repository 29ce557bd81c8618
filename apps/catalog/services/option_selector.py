from typing import List

from apps.catalog.conf import VariantSettings


class OptionSelector:
    """
    The "Option Name" picker and value boxes above the combination table.

    Collects an option name and a set of values, then hands them to the
    editor's ``add_option``.
    """

    def __init__(self, editor):
        self.editor = editor
        self.option_name = ''
        self.selected_values: List[str] = []

    def choices(self) -> List[str]:
        """Unused configured names first, then the options already added."""
        return self.editor.available_option_names() + [
            option.name for option in self.editor.options
        ]

    def select_option(self, name: str):
        """Pick an option; an existing one comes back with its values ticked."""
        self.option_name = name or ''
        existing = self.editor.state.store.get(self.option_name)
        self.selected_values = list(existing.values) if existing else []

    def preset_values(self) -> List[str]:
        return VariantSettings.preset_values().get(self.option_name, [])

    def toggle_value(self, value: str):
        if value in self.selected_values:
            self.selected_values.remove(value)
        else:
            self.selected_values.append(value)

    @property
    def shows_value_boxes(self) -> bool:
        return bool(self.option_name) or bool(self.editor.combinations)

    def submit(self) -> bool:
        """Add the selection; the picker is cleared only if the add went through."""
        added = self.editor.add_option(self.option_name, self.selected_values)
        if added:
            self.option_name = ''
            self.selected_values = []
        return added
