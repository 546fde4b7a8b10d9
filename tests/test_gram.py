from unittest import mock

import pytest

from lggram.gram import (
    WRITER,
    GramError,
    feature,
    set_feature_async,
    system_information_async,
)


class _FakeProcess:
    def __init__(self, returncode, stdout=b"", stderr=b""):
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr

    async def communicate(self):
        return self._stdout, self._stderr


def _patch_exec(**kwargs):
    return mock.patch(
        "lggram.gram.asyncio.create_subprocess_exec",
        new=mock.AsyncMock(**kwargs),
    )


def test_feature_reads_trimmed_value(tmp_path):
    (tmp_path / "fn_lock").write_text("1\n")
    assert feature("fn_lock", tmp_path) == "1"


def test_feature_missing_file(tmp_path):
    with pytest.raises(GramError, match="file not found"):
        feature("usb_charge", tmp_path)


def test_feature_unreadable(tmp_path):
    (tmp_path / "reader_mode").mkdir()
    with pytest.raises(GramError):
        feature("reader_mode", tmp_path)


@pytest.mark.asyncio
async def test_system_information_success():
    with _patch_exec(return_value=_FakeProcess(0, b"Product Name\nGram")) as run:
        info = await system_information_async()
    assert info == "Product Name\nGram"
    assert run.call_args.args == ("pkexec", WRITER, "--system-info")


@pytest.mark.asyncio
async def test_system_information_failure():
    with _patch_exec(return_value=_FakeProcess(1, b"", b"not authorized")):
        with pytest.raises(GramError, match="not authorized"):
            await system_information_async()


@pytest.mark.asyncio
async def test_set_feature_success():
    output = b"Successfully changed fn_lock setting\n"
    with _patch_exec(return_value=_FakeProcess(0, output)) as run:
        result = await set_feature_async("fn_lock", "1", writer="/opt/writer")
    assert result == output.decode()
    assert run.call_args.args == ("pkexec", "/opt/writer", "--feature", "fn_lock=1")


@pytest.mark.asyncio
async def test_set_feature_failure():
    with _patch_exec(return_value=_FakeProcess(1, b"", b"ERROR: bad")):
        with pytest.raises(GramError, match="ERROR: bad"):
            await set_feature_async("usb_charge", "0")


@pytest.mark.asyncio
async def test_set_feature_launch_error():
    with _patch_exec(side_effect=FileNotFoundError("pkexec missing")):
        with pytest.raises(GramError, match="pkexec missing"):
            await set_feature_async("usb_charge", "0")