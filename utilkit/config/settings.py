"""
Runtime configuration for utilkit.

Every field of `App` can be set from the environment with a `UTK_` prefix,
e.g. `UTK_BEQUIET=true` or `UTK_HISTORYLENGTH=200`. The REPL history file
sits in the per-user data directory given by appdirs.
"""

from pathlib import Path
from typing import Final
from appdirs import user_data_dir
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR: Final[Path] = Path(user_data_dir("utilkit", ""))
HISTORY_FILE: Final[Path] = DATA_DIR / "history"


class App(BaseSettings):
    """
    Attributes:
        beQuiet: Drop all LOG output
        detailedOutput: Report per-file results when rendering
        historyLength: Number of REPL history entries to keep
        renderPattern: Default glob used to select files to render
    """

    beQuiet: bool = False
    detailedOutput: bool = False
    historyLength: int = 1000
    renderPattern: str = "**/*"

    model_config = SettingsConfigDict(
        env_prefix="UTK_",
        case_sensitive=False,
        extra="allow",
    )


def dataDir_ensure() -> Path:
    """Create the user data directory if needed and return it."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_DIR


appsettings: Final[App] = App()
