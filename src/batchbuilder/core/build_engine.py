from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Protocol, Sequence

from batchbuilder.core.build_options import BuildOptions
from batchbuilder.core.models import BuildConfiguration
from batchbuilder.core.storage import atomic_write_json

logger = logging.getLogger(__name__)


class BuildEngine(Protocol):
    def build_player(
        self,
        *,
        scenes: Sequence[str],
        output_path: str,
        target: str,
        options: BuildOptions,
        development: bool,
        allow_debugging: bool,
    ) -> object: ...


class SubprocessBuildEngine:
    """Runs an external engine executable and waits for it to finish.

    The build request is handed over as a JSON file; the engine receives its
    path via ``--build-request``.
    """

    def __init__(
        self,
        *,
        executable_path: str,
        arguments: str,
        working_directory: str,
        request_dir: Path,
    ) -> None:
        self._executable_path = executable_path
        self._arguments = arguments
        self._working_directory = working_directory
        self._request_dir = request_dir

    def build_player(
        self,
        *,
        scenes: Sequence[str],
        output_path: str,
        target: str,
        options: BuildOptions,
        development: bool,
        allow_debugging: bool,
    ) -> int:
        if not self._executable_path:
            raise ValueError("Engine executable path is required")
        if not os.path.exists(self._executable_path):
            raise FileNotFoundError(self._executable_path)

        request_file = self._request_dir / f"build-{os.getpid()}.json"
        request = BuildConfiguration(
            target=target,
            output_path=output_path,
            options=options,
            development_mode=development,
            debugging_allowed=allow_debugging,
            scenes=tuple(scenes),
        )
        atomic_write_json(request_file, request.to_dict())

        args = [self._executable_path]
        if self._arguments.strip():
            args.extend(shlex.split(self._arguments, posix=os.name != "nt"))
        args.extend(["--build-request", str(request_file)])

        cwd = self._working_directory.strip() or str(Path(self._executable_path).parent)

        logger.info("Invoking build engine: %s", self._executable_path)
        proc = subprocess.run(args, cwd=cwd, stdin=subprocess.DEVNULL, check=False)
        logger.info("Build engine exited with code %s", proc.returncode)
        return int(proc.returncode)
