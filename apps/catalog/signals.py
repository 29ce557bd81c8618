"""
Django signals for the catalog app.
Pushes variant editor snapshots to the enclosing product form.
"""
import logging

from django.dispatch import Signal

logger = logging.getLogger(__name__)


class ChangeNotifier:
    """
    Per-editor pair of signals, sent synchronously after every mutation.

    Receivers are called as ``receiver(sender, options, combinations, **kwargs)``
    with immutable snapshots of both lists. Exceptions raised by a receiver
    propagate to the caller.
    """

    def __init__(self):
        self.options_changed = Signal()
        self.combinations_changed = Signal()

    def connect(self, on_options_change=None, on_combinations_change=None):
        # The editor owns these signals, so strong references are fine.
        if on_options_change is not None:
            self.options_changed.connect(on_options_change, weak=False)
        if on_combinations_change is not None:
            self.combinations_changed.connect(on_combinations_change, weak=False)

    def notify(self, sender, state, options_changed=False, combinations_changed=False):
        snapshot = {
            'options': state.options,
            'combinations': state.combinations,
        }
        if options_changed:
            logger.debug("Sending options_changed (%d options)", len(state.options))
            self.options_changed.send(sender=sender, **snapshot)
        if combinations_changed:
            logger.debug(
                "Sending combinations_changed (%d combinations)", len(state.combinations)
            )
            self.combinations_changed.send(sender=sender, **snapshot)
