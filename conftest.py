"""
Pytest configuration and fixtures.
"""
import pytest


class SignalRecorder:
    """Receiver that remembers every snapshot it was sent."""

    def __init__(self):
        self.calls = []

    def __call__(self, sender, options, combinations, **kwargs):
        self.calls.append({
            'sender': sender,
            'options': options,
            'combinations': combinations,
        })

    @property
    def count(self):
        return len(self.calls)

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def options_recorder():
    return SignalRecorder()


@pytest.fixture
def combinations_recorder():
    return SignalRecorder()


@pytest.fixture
def editor(options_recorder, combinations_recorder):
    """Empty editor wired to both recorders."""
    from apps.catalog.services import VariantEditor
    return VariantEditor(
        on_options_change=options_recorder,
        on_combinations_change=combinations_recorder,
    )


@pytest.fixture
def size_color_editor(editor):
    """Editor holding Size UK 7/8 and Color Red."""
    editor.add_option('Size UK', ['7', '8'])
    editor.add_option('Color', ['Red'])
    return editor


@pytest.fixture
def size_color_options():
    from apps.catalog.engine import VariantOption
    return (
        VariantOption('Size UK', ('7', '8')),
        VariantOption('Color', ('Red',)),
    )
