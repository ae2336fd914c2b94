"""
Shell Executor
Fire-and-forget informational commands (``echo`` by default), bounded by a timeout.
"""
import asyncio
import logging
from asyncio import subprocess
from typing import Sequence

from app.errors import SideEffectFailed

logger = logging.getLogger(__name__)


class ShellExecutor:
    def __init__(self, command: Sequence[str] = ("echo",), timeout: float = 5.0):
        self.command = list(command)
        self.timeout = timeout

    async def run(self, text: str) -> str:
        """
        Run ``<command> <text>`` and return its stdout.

        Raises:
            SideEffectFailed: the command could not start, exited non-zero or timed out.
        """
        cmd = [*self.command, text]
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE
            )
        except OSError as e:
            logger.error(f"Could not spawn {cmd[0]}: {e}")
            raise SideEffectFailed(str(e))

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()
            logger.warning(f"Shell command timed out after {self.timeout}s: {text}")
            raise SideEffectFailed(f"timed out after {self.timeout:g}s")

        if process.returncode != 0:
            detail = stderr.decode('utf-8', errors='replace').strip() or f"exit code {process.returncode}"
            logger.warning(f"Shell command failed ({process.returncode}): {detail}")
            raise SideEffectFailed(detail)

        output = stdout.decode('utf-8', errors='replace').strip()
        logger.info(output)
        return output
