from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

from batchbuilder.core.arguments import ArgumentStore
from batchbuilder.core.build_engine import BuildEngine, SubprocessBuildEngine
from batchbuilder.core.config_store import ConfigStore
from batchbuilder.core.logging_setup import configure_logging
from batchbuilder.core.paths import AppPaths
from batchbuilder.core.resolver import ConfigurationResolver, run_once

ARG_LOG_FILE = "-logfile"


class AppState:
    def __init__(self, *, config_store: ConfigStore, engine: BuildEngine) -> None:
        self.config_store = config_store
        self.engine = engine

    @classmethod
    def create(cls, *, arguments: ArgumentStore, config_file: Path | None = None) -> "AppState":
        paths = AppPaths.default()
        if config_file is not None:
            config_store = ConfigStore.from_file(config_file, paths)
        else:
            config_store = ConfigStore.default(paths)
        configure_logging(log_dir=paths.log_dir, log_file=arguments.get_value(ARG_LOG_FILE, None))
        config = config_store.config
        engine = SubprocessBuildEngine(
            executable_path=config.engine_executable,
            arguments=config.engine_arguments,
            working_directory=config.working_directory,
            request_dir=paths.request_dir,
        )
        return cls(config_store=config_store, engine=engine)

    def run_batch(
        self,
        arguments: ArgumentStore,
        *,
        exit_process: Callable[[int], object] = sys.exit,
    ) -> int | None:
        resolver = ConfigurationResolver(arguments, scene_provider=self.config_store.scene_paths)
        return run_once(resolver, engine=self.engine, exit_process=exit_process)
