import json
import logging
from dataclasses import dataclass
from pathlib import Path

from batchbuilder.core.models import BuilderConfig
from batchbuilder.core.paths import AppPaths
from batchbuilder.core.storage import atomic_write_json

logger = logging.getLogger(__name__)


@dataclass
class ConfigStore:
    paths: AppPaths
    config: BuilderConfig
    config_file: Path

    @classmethod
    def default(cls, paths: AppPaths | None = None) -> "ConfigStore":
        paths = paths or AppPaths.default()
        paths.config_dir.mkdir(parents=True, exist_ok=True)
        paths.log_dir.mkdir(parents=True, exist_ok=True)

        config_file = paths.config_file
        if config_file.exists():
            try:
                config = cls._load_from_file(config_file)
            except (OSError, ValueError, TypeError):
                logger.warning("Unreadable config %s, resetting to defaults", config_file)
                backup = config_file.with_suffix(".bak")
                try:
                    config_file.replace(backup)
                except OSError:
                    pass
                config = BuilderConfig.default()
                cls._save_to_file(config_file, config)
        else:
            config = BuilderConfig.default()
            cls._save_to_file(config_file, config)
        return cls(paths=paths, config=config, config_file=config_file)

    @classmethod
    def from_file(cls, path: Path, paths: AppPaths | None = None) -> "ConfigStore":
        config = cls._load_from_file(path)
        return cls(paths=paths or AppPaths.default(), config=config, config_file=path)

    @staticmethod
    def _load_from_file(path: Path) -> BuilderConfig:
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            return BuilderConfig.default()
        return BuilderConfig.from_dict(raw)

    @staticmethod
    def _save_to_file(path: Path, config: BuilderConfig) -> None:
        atomic_write_json(path, config.to_dict())

    def scene_paths(self) -> list[str]:
        return self.config.scene_paths()
