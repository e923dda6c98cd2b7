from __future__ import annotations

import logging
from typing import Callable, Collection, Sequence

from batchbuilder.core.arguments import ArgumentStore
from batchbuilder.core.build_engine import BuildEngine
from batchbuilder.core.build_options import BUILD_TARGETS, BuildOptions, parse_build_options
from batchbuilder.core.models import BuildConfiguration

logger = logging.getLogger(__name__)

FLAG_BATCH_MODE = "-batchmode"
FLAG_BATCH_MODE_BUILDER = "-batchmodebuilder"
FLAG_DEV_BUILD = "-development"
FLAG_DEBUG_BUILD = "-debug"
ARG_BUILD_TARGET = "-buildtarget"
ARG_BUILD_OPTIONS = "-buildopts"
ARG_BUILD_PATH = "-buildpath"

EXIT_SUCCESS = 0
EXIT_FAILURE = -1


def batch_build_requested(arguments: ArgumentStore) -> bool:
    return arguments.has_flag(FLAG_BATCH_MODE) and arguments.has_flag(FLAG_BATCH_MODE_BUILDER)


class ResolutionError(Exception):
    def __init__(self, flag: str, message: str) -> None:
        super().__init__(message)
        self.flag = flag


class MissingArgumentError(ResolutionError):
    pass


class InvalidValueError(ResolutionError):
    def __init__(self, flag: str, message: str, value: str) -> None:
        super().__init__(flag, message)
        self.value = value


class ConfigurationResolver:
    def __init__(
        self,
        arguments: ArgumentStore,
        *,
        scene_provider: Callable[[], Sequence[str]],
        targets: Collection[str] = BUILD_TARGETS,
        parse_options: Callable[[str], BuildOptions] = parse_build_options,
        development_bit: BuildOptions = BuildOptions.Development,
        debugging_bit: BuildOptions = BuildOptions.AllowDebugging,
    ) -> None:
        self._arguments = arguments
        self._scene_provider = scene_provider
        self._targets = frozenset(targets)
        self._parse_options = parse_options
        self._development_bit = development_bit
        self._debugging_bit = debugging_bit

    def is_activated(self) -> bool:
        return batch_build_requested(self._arguments)

    def resolve(self) -> BuildConfiguration:
        """Validate the command line and build the configuration.

        Raises :class:`MissingArgumentError` or :class:`InvalidValueError`
        before anything is constructed; never touches the build engine.
        """
        args = self._arguments

        target = args.get_value(ARG_BUILD_TARGET, None)
        if target is None:
            raise MissingArgumentError(ARG_BUILD_TARGET, "no build target specified")
        if target not in self._targets:
            raise InvalidValueError(ARG_BUILD_TARGET, "unrecognized build target value", target)

        output_path = args.get_value(ARG_BUILD_PATH, None)
        if output_path is None:
            raise MissingArgumentError(ARG_BUILD_PATH, "no build path specified")

        development = args.has_flag(FLAG_DEV_BUILD)
        allow_debugging = args.has_flag(FLAG_DEBUG_BUILD)

        options_arg = args.get_value(ARG_BUILD_OPTIONS, None)
        options = BuildOptions.None_
        if options_arg is not None:
            try:
                options = self._parse_options(options_arg)
            except ValueError as exc:
                raise InvalidValueError(
                    ARG_BUILD_OPTIONS, "unrecognized build options value", options_arg
                ) from exc

        if development:
            options |= self._development_bit
        if allow_debugging:
            options |= self._debugging_bit

        return BuildConfiguration(
            target=target,
            output_path=output_path,
            options=options,
            development_mode=development,
            debugging_allowed=allow_debugging,
            scenes=tuple(self._scene_provider()),
        )


def run_once(
    resolver: ConfigurationResolver,
    *,
    engine: BuildEngine,
    exit_process: Callable[[int], object],
) -> int | None:
    """Handle the host's one-shot "ready" notification.

    Returns ``None`` without side effects when batch building was not
    requested. Otherwise calls ``exit_process`` with the exit code and returns
    the same code.
    """
    if not resolver.is_activated():
        return None

    logger.info("Batchmode detected, builder trying to parse command line")
    try:
        configuration = resolver.resolve()
    except InvalidValueError as exc:
        logger.error("%s argument %s %r, aborting", exc.flag, exc, exc.value)
        return _fail(exit_process)
    except MissingArgumentError as exc:
        logger.error("No %s argument set (%s), aborting", exc.flag, exc)
        return _fail(exit_process)

    logger.info("Starting build")
    logger.info("Build configuration:%s", configuration.summary())
    engine.build_player(
        scenes=configuration.scenes,
        output_path=configuration.output_path,
        target=configuration.target,
        options=configuration.options,
        development=configuration.development_mode,
        allow_debugging=configuration.debugging_allowed,
    )
    exit_process(EXIT_SUCCESS)
    return EXIT_SUCCESS


def _fail(exit_process: Callable[[int], object]) -> int:
    logger.error("Failed to parse the command line, check your logs and try again")
    exit_process(EXIT_FAILURE)
    return EXIT_FAILURE
