from __future__ import annotations
from dataclasses import dataclass
from typing import Awaitable, Callable, Mapping, Optional, Sequence
import asyncio
import logging

log = logging.getLogger("mobile_env.probe")

# Shell convention for "command not found".
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


@dataclass(frozen=True)
class CommandResult:
    status: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.status == 0

    def first_error_line(self) -> str:
        for text in (self.stderr, self.stdout):
            for line in text.splitlines():
                if line.strip():
                    return line.strip()
        return ""


CommandRunner = Callable[[Sequence[str], Optional[Mapping[str, str]]], Awaitable[CommandResult]]


async def run_command(args: Sequence[str], env: Optional[Mapping[str, str]] = None) -> CommandResult:
    """Run an external tool and capture its output. Never raises for a missing binary."""
    log.debug("exec %s", " ".join(args))
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=dict(env) if env is not None else None,
        )
    except FileNotFoundError:
        return CommandResult(COMMAND_NOT_FOUND, "", f"{args[0]}: command not found")
    except PermissionError:
        return CommandResult(COMMAND_NOT_EXECUTABLE, "", f"{args[0]}: permission denied")
    out, err = await proc.communicate()
    status = proc.returncode if proc.returncode is not None else -1
    log.debug("exit %s from %s", status, args[0])
    return CommandResult(
        status=status,
        stdout=out.decode("utf-8", errors="replace"),
        stderr=err.decode("utf-8", errors="replace"),
    )
