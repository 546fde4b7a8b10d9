"""Privileged helper that reads DMI data and writes LG Gram kernel settings."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

DMI_DIR = Path("/sys/devices/virtual/dmi/id")
SETTINGS_DIR = Path("/sys/devices/platform/lg-laptop")
UNIT_DIR = Path("/usr/lib/systemd/system")

SYSTEM_INFO = "--system-info"
FEATURE = "--feature"

# Accepted values per setting, mapped to the systemctl action they imply.
_FEATURE_VALUES: dict[str, dict[str, str]] = {
    "battery_care_limit": {"80": "enable", "100": "disable"},
    "fn_lock": {"0": "disable", "1": "enable"},
    "usb_charge": {"0": "disable", "1": "enable"},
    "reader_mode": {"0": "disable", "1": "enable"},
}

_DMI_FIELDS = (
    ("Product Name", "product_name"),
    ("Serial Number", "product_serial"),
    ("BIOS Vendor", "bios_vendor"),
    ("BIOS Version", "bios_version"),
)


class WriterError(Exception):
    """An operation of the writer failed."""


class UsageError(WriterError):
    """The command line arguments are not valid."""


@dataclass(frozen=True)
class Request:
    """A validated command: the mode and, for features, what to write."""

    mode: str
    setting: str = ""
    value: str = ""
    action: str = ""


def validate_args(args):
    """Check the full argument vector (program name first) and return a Request."""
    if len(args) < 2:
        raise UsageError("missing mode")
    mode = args[1]

    if mode == SYSTEM_INFO:
        return Request(mode)

    if mode != FEATURE:
        raise UsageError(f"unknown mode: {mode}")

    if len(args) < 3 or "=" not in args[2]:
        raise UsageError("expected setting=value")
    setting, value = args[2].split("=", 1)

    try:
        action = _FEATURE_VALUES[setting][value]
    except KeyError:
        raise UsageError(f"invalid setting: {args[2]}") from None

    return Request(mode, setting, value, action)


def system_information(dmi_dir=DMI_DIR):
    """Return label/value lines describing the machine, read from DMI files."""
    base = Path(dmi_dir)
    lines = []
    for label, name in _DMI_FIELDS:
        try:
            value = (base / name).read_text().strip()
        except OSError as error:
            raise WriterError(str(error)) from error
        lines.extend((label, value))
    return "\n".join(lines)


def set_feature(setting, value, action, settings_dir=SETTINGS_DIR, unit_dir=UNIT_DIR):
    """Write a setting and enable or disable the service that restores it at boot."""
    settings_file = Path(settings_dir) / setting
    if not settings_file.exists():
        raise WriterError(f"ERROR: {setting} setting file not found")

    service_name = f"lg-gram-{setting.replace('_', '-')}.service"
    if not (Path(unit_dir) / service_name).exists():
        raise WriterError(f"ERROR: {service_name} unit file not found")

    try:
        settings_file.write_text(f"{value}\n")
    except OSError as error:
        raise WriterError(f"ERROR: Error writing to {setting} setting file") from error

    try:
        result = subprocess.run(
            ["systemctl", action, service_name], capture_output=True, check=False
        )
    except OSError as error:
        raise WriterError(str(error)) from error

    if result.returncode != 0:
        raise WriterError(result.stderr.decode("utf-8", errors="replace"))

    return f"Successfully changed {setting} setting"


def usage(app_path):
    """Return the usage message for the program at app_path."""
    return f"ERROR: USAGE: {Path(app_path).name} mode setting=value"


def main(argv=None):
    """Run the writer and return its exit status."""
    args = list(sys.argv if argv is None else argv)

    if os.geteuid() != 0:
        print("ERROR: App must be run as root", file=sys.stderr)
        return 1

    try:
        request = validate_args(args)
    except UsageError:
        print(usage(args[0] if args else ""), file=sys.stderr)
        return 1

    try:
        if request.mode == SYSTEM_INFO:
            message = system_information()
        else:
            message = set_feature(request.setting, request.value, request.action)
    except WriterError as error:
        print(error, file=sys.stderr)
        return 1

    print(message)
    return 0