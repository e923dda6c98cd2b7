from dataclasses import dataclass
from pathlib import Path

from platformdirs import PlatformDirs


@dataclass(frozen=True)
class AppPaths:
    config_dir: Path
    log_dir: Path
    cache_dir: Path

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.json"

    @property
    def request_dir(self) -> Path:
        return self.cache_dir / "requests"

    @classmethod
    def default(cls) -> "AppPaths":
        dirs = PlatformDirs(appname="BatchBuilder", appauthor=False)
        return cls(
            config_dir=Path(dirs.user_config_dir),
            log_dir=Path(dirs.user_log_dir),
            cache_dir=Path(dirs.user_cache_dir),
        )
