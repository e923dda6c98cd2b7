from pathlib import Path

from batchbuilder.core.arguments import ArgumentStore
from batchbuilder.core.resolver import batch_build_requested
from batchbuilder.core.state import AppState


def run_app(*, arguments: ArgumentStore, config_file: Path | None = None) -> int:
    # Without both activation flags the host carries on untouched: no config, no log files.
    if not batch_build_requested(arguments):
        return 0
    state = AppState.create(arguments=arguments, config_file=config_file)
    code = state.run_batch(arguments)
    return 0 if code is None else code
