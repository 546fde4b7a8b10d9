"""Access to LG Gram laptop features through sysfs and the privileged writer."""

from __future__ import annotations

import asyncio
from pathlib import Path

WRITER = "/usr/share/lg-gram-settings/lg-gram-writer"
SETTINGS_PATH = Path("/sys/devices/platform/lg-laptop")


class GramError(Exception):
    """Reading or changing a laptop feature failed."""


async def _run_writer(writer, *args):
    try:
        process = await asyncio.create_subprocess_exec(
            "pkexec",
            writer,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
    except OSError as error:
        raise GramError(str(error)) from error

    if process.returncode != 0:
        raise GramError((stderr or b"").decode("utf-8", errors="replace"))
    return (stdout or b"").decode("utf-8", errors="replace")


async def system_information_async(writer=WRITER):
    """Ask the writer, with elevated rights, for the system information text."""
    return await _run_writer(writer, "--system-info")


def feature(feature_id, settings_dir=SETTINGS_PATH):
    """Return the current value of a feature, read from its settings file."""
    path = Path(settings_dir) / feature_id
    if not path.exists():
        raise GramError("file not found")
    try:
        return path.read_text().strip()
    except OSError as error:
        raise GramError(str(error)) from error


async def set_feature_async(feature_id, value, writer=WRITER):
    """Ask the writer, with elevated rights, to set a feature to value."""
    return await _run_writer(writer, "--feature", f"{feature_id}={value}")