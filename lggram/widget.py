"""A two-state feature row bound to one LG Gram kernel setting."""

from __future__ import annotations

from .gram import SETTINGS_PATH, GramError, feature, set_feature_async


class FeatureToggle:
    """A row with an off and an on choice that writes the chosen value to a feature.

    The row stays insensitive until ``init_id`` has read the current value.
    Changing the choice of a sensitive row writes the new value.
    If that write fails, the choice is put back and an error is emitted.
    """

    def __init__(
        self,
        title="",
        *,
        off_value="0",
        on_value="1",
        icon_name=None,
        settings_dir=SETTINGS_PATH,
        setter=set_feature_async,
    ):
        self.title = title
        self.icon_name = icon_name
        self.off_value = off_value
        self.on_value = on_value
        self.settings_dir = settings_dir
        self.active = 0
        self.sensitive = False
        self._setter = setter
        self._feature_id = None
        self._reverting = False
        self._error_handlers = []

    @property
    def feature_id(self):
        """The feature this row controls, or None before ``init_id``."""
        return self._feature_id

    @property
    def values(self):
        """The labels of the two choices, off first."""
        return (self.off_value, self.on_value)

    @property
    def value(self):
        """The label of the active choice."""
        return self.values[self.active]

    def connect_error(self, callback):
        """Call ``callback(message)`` whenever the row reports an error."""
        self._error_handlers.append(callback)
        return callback

    def _emit_error(self, message):
        for handler in list(self._error_handlers):
            handler(message)

    def init_id(self, feature_id):
        """Read the current value of ``feature_id`` and bind the row to it."""
        if self._feature_id is not None:
            raise RuntimeError(f"row already bound to {self._feature_id}")
        try:
            current = feature(feature_id, self.settings_dir)
            try:
                index = self.values.index(current)
            except ValueError:
                raise GramError("unknown value") from None
        except GramError as error:
            self._emit_error(f"Failed to read {feature_id}: {error}")
            return
        self.active = index
        self._feature_id = feature_id
        self.sensitive = True

    async def select(self, index):
        """Make choice ``index`` active, writing it out when the row is sensitive."""
        if index not in range(len(self.values)):
            raise IndexError(f"no choice at index {index}")
        if index == self.active:
            return
        self.active = index
        if self.sensitive:
            await self._apply()

    async def activate(self):
        """Switch to the other choice, as when the row is activated."""
        await self.select(1 - self.active)

    async def _apply(self):
        if self._reverting:
            self._reverting = False
            return
        if self._feature_id is None:
            self._emit_error("ERROR: setting ID not initialized")
            return
        try:
            await self._setter(self._feature_id, self.value)
        except GramError as error:
            self._reverting = True
            await self.select(1 - self.active)
            self._emit_error(str(error))