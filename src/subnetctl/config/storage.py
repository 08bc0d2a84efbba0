"""Where subnet state is stored between runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

APP_DIR_NAME: Final[str] = "subnetctl"
STATE_DB_FILENAME: Final[str] = "state.db"
DATA_DIR_ENV_VAR: Final[str] = "SUBNETCTL_DATA_DIR"
DATABASE_URI_ENV_VAR: Final[str] = "STATE_DATABASE_URI"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Location of the state database.

    ``database_uri`` wins when set; otherwise a SQLite file is kept under
    ``data_dir``, which is created on first use.
    """

    data_dir: Path
    database_uri: str | None = None

    def state_database_path(self) -> Path:
        data_dir = self.data_dir.expanduser().resolve()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir / STATE_DB_FILENAME

    def state_database_uri(self) -> str:
        if self.database_uri:
            return self.database_uri
        return f"sqlite+pysqlite:///{self.state_database_path()}"


def _platform_data_root() -> Path:
    if os.name == "nt":
        local_app_data = os.getenv("LOCALAPPDATA")
        return Path(local_app_data) if local_app_data else Path.home() / "AppData" / "Local"
    xdg_data_home = os.getenv("XDG_DATA_HOME")
    return Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"


def get_storage_config() -> StorageConfig:
    data_dir = optional_env_var(DATA_DIR_ENV_VAR)
    return StorageConfig(
        data_dir=Path(data_dir) if data_dir else _platform_data_root() / APP_DIR_NAME,
        database_uri=optional_env_var(DATABASE_URI_ENV_VAR),
    )
