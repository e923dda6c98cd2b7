from dataclasses import dataclass, field
from typing import Any

from batchbuilder.core.build_options import BuildOptions, format_build_options


@dataclass(frozen=True)
class BuildConfiguration:
    target: str
    output_path: str
    options: BuildOptions
    development_mode: bool
    debugging_allowed: bool
    scenes: tuple[str, ...]

    def summary(self) -> str:
        return (
            f"\n target path : {self.output_path}"
            f"\n build target : {self.target}"
            f"\n build options : {format_build_options(self.options)}"
            f"\n isDebug : {self.debugging_allowed}"
            f"\n isDev : {self.development_mode}\n"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "output_path": self.output_path,
            "options": int(self.options),
            "options_names": format_build_options(self.options),
            "development": self.development_mode,
            "allow_debugging": self.debugging_allowed,
            "scenes": list(self.scenes),
        }


@dataclass
class SceneEntry:
    path: str
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "enabled": self.enabled}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SceneEntry":
        return cls(
            path=str(raw.get("path") or ""),
            enabled=bool(raw.get("enabled", True)),
        )


@dataclass
class BuilderConfig:
    schema_version: int
    engine_executable: str = ""
    engine_arguments: str = ""
    working_directory: str = ""
    scenes: list[SceneEntry] = field(default_factory=list)

    @classmethod
    def default(cls) -> "BuilderConfig":
        return cls(schema_version=1)

    def scene_paths(self) -> list[str]:
        # Disabled entries are still part of the build list; the engine decides what to do with them.
        return [s.path for s in self.scenes if s.path]

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "engine_executable": self.engine_executable,
            "engine_arguments": self.engine_arguments,
            "working_directory": self.working_directory,
            "scenes": [s.to_dict() for s in self.scenes],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "BuilderConfig":
        scenes_raw = raw.get("scenes") or []
        scenes: list[SceneEntry] = []
        for entry in scenes_raw:
            if isinstance(entry, str):
                scenes.append(SceneEntry(path=entry))
            elif isinstance(entry, dict):
                scenes.append(SceneEntry.from_dict(entry))
        return cls(
            schema_version=int(raw.get("schema_version") or 1),
            engine_executable=str(raw.get("engine_executable") or ""),
            engine_arguments=str(raw.get("engine_arguments") or ""),
            working_directory=str(raw.get("working_directory") or ""),
            scenes=scenes,
        )
