import asyncio

import pytest

from app.errors import SideEffectFailed
from app.services.shell_service import ShellExecutor


def test_echo_returns_stdout():
    assert asyncio.run(ShellExecutor(("echo",)).run("Starting server Minecraft Server")) == "Starting server Minecraft Server"


def test_non_zero_exit_reports_stderr():
    shell = ShellExecutor(("sh", "-c", "echo boom >&2; exit 3", "sh"))
    with pytest.raises(SideEffectFailed) as excinfo:
        asyncio.run(shell.run("ignored"))
    assert excinfo.value.detail == "boom"


def test_non_zero_exit_without_stderr():
    shell = ShellExecutor(("sh", "-c", "exit 4", "sh"))
    with pytest.raises(SideEffectFailed) as excinfo:
        asyncio.run(shell.run("ignored"))
    assert excinfo.value.detail == "exit code 4"


def test_timeout_kills_the_command():
    shell = ShellExecutor(("sh", "-c", "sleep 5", "sh"), timeout=0.2)
    with pytest.raises(SideEffectFailed) as excinfo:
        asyncio.run(shell.run("ignored"))
    assert excinfo.value.detail == "timed out after 0.2s"


def test_missing_binary():
    with pytest.raises(SideEffectFailed):
        asyncio.run(ShellExecutor(("lonely-panel-no-such-binary",)).run("hello"))
