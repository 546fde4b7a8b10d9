"""The main window: the feature rows, toasts and system information."""

from __future__ import annotations

import subprocess
from pathlib import Path

from .gram import SETTINGS_PATH, GramError, set_feature_async, system_information_async
from .widget import FeatureToggle

BATTERY_LIMIT = "battery_care_limit"
FN_LOCK = "fn_lock"
READER_MODE = "reader_mode"
USB_CHARGE = "usb_charge"


def parse_system_information(info):
    """Pair up alternating label and value lines; a trailing odd line is dropped."""
    lines = iter(info.split("\n"))
    return list(zip(lines, lines))


def _open_uri(uri):
    try:
        subprocess.Popen(
            ["xdg-open", uri], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
    except OSError:
        return False
    return True


class MainWindow:
    """Holds one row per laptop feature and collects error toasts."""

    def __init__(
        self,
        application=None,
        *,
        settings_dir=SETTINGS_PATH,
        setter=set_feature_async,
        info_source=system_information_async,
        launcher=_open_uri,
        on_toast=None,
    ):
        self.application = application
        self.settings_dir = Path(settings_dir)
        self.toasts = []
        self.on_toast = on_toast
        self._info_source = info_source
        self._launcher = launcher

        def row(title, icon, **values):
            return FeatureToggle(
                title, icon_name=icon, settings_dir=settings_dir, setter=setter, **values
            )

        self.battery_limit_widget = row(
            "Battery Care Limit", "battery-symbolic", off_value="100", on_value="80"
        )
        self.fn_lock_widget = row("Fn Lock", "input-keyboard-symbolic")
        self.usb_charge_widget = row("USB Charge", "drive-removable-media-symbolic")
        self.reader_mode_widget = row("Reader Mode", "display-brightness-symbolic")

        for widget in self.widgets:
            widget.connect_error(self.show_toast)

        self.init_kernel_features()

    @property
    def widgets(self):
        """The feature rows in display order."""
        return (
            self.battery_limit_widget,
            self.fn_lock_widget,
            self.usb_charge_widget,
            self.reader_mode_widget,
        )

    def show_toast(self, error):
        """Show an error message to the user."""
        message = error.strip()
        self.toasts.append(message)
        if self.on_toast is not None:
            self.on_toast(message)

    def init_kernel_features(self):
        """Bind every row to its kernel feature."""
        self.battery_limit_widget.init_id(BATTERY_LIMIT)
        self.fn_lock_widget.init_id(FN_LOCK)
        self.usb_charge_widget.init_id(USB_CHARGE)
        self.reader_mode_widget.init_id(READER_MODE)

    async def show_system_info(self):
        """Return system information as (label, value) pairs, or None after a toast."""
        try:
            info = await self._info_source()
        except GramError as error:
            self.show_toast(str(error))
            return None
        return parse_system_information(info)

    def open_settings_folder(self):
        """Open the settings directory in the default file manager."""
        return self._launcher(self.settings_dir.as_uri())