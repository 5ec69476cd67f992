from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple


class ProcessResult(NamedTuple):
    returncode: int
    stdout: bytes
    stderr: bytes


def run_process(
    command: Sequence[str],
    *,
    cwd: Path,
    capture_stderr: bool = True,
) -> ProcessResult:
    """Runs a process to completion and returns its exit status and raw output.

    Standard input is connected to the null device. Raises `OSError` if the
    process could not be spawned.
    """
    result = subprocess.run(
        list(command),
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE if capture_stderr else None,
        check=False,
    )

    return ProcessResult(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr if capture_stderr else b"",
    )
