from pathlib import Path
from pydantic import BaseModel, Field
import os
from dotenv import load_dotenv
from dynamic_component import __version__

"""Central configuration.

Values come from the process environment. A ``config.env`` file in the working
directory (or the file named by DYNAMIC_COMPONENT_ENV_FILE) is loaded first so
local development can keep settings out of shell profiles.

Env vars:
  DYNAMIC_COMPONENT_ENV_FILE     - explicit dotenv file to load
  DYNAMIC_COMPONENT_LOG_LEVEL    - DEBUG, INFO, WARNING, ERROR, CRITICAL
  DYNAMIC_COMPONENT_PACKAGES     - comma separated packages to scan for components
  DYNAMIC_COMPONENT_CONFIG_FILE  - YAML file with per-controller component declarations
"""

_diagnostics: list[str] = []

_candidates: list[Path] = []
_env_override = os.getenv('DYNAMIC_COMPONENT_ENV_FILE')
if _env_override:
    _candidates.append(Path(_env_override))
_candidates.append(Path.cwd() / 'config.env')

for _p in _candidates:
    if _p.exists():
        load_dotenv(str(_p))
        _diagnostics.append(f"loaded_env_file={_p}")
        break


def _env_list(name: str) -> list[str]:
    raw = os.getenv(name) or ''
    return [item.strip() for item in raw.split(',') if item.strip()]


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if not raw:
        return None
    return Path(raw)


class Settings(BaseModel):
    app_name: str = 'dynamic-component'
    version: str = __version__
    # Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = Field(default_factory=lambda: os.getenv('DYNAMIC_COMPONENT_LOG_LEVEL', 'INFO'))
    component_packages: list[str] = Field(default_factory=lambda: _env_list('DYNAMIC_COMPONENT_PACKAGES'))
    components_file: Path | None = Field(default_factory=lambda: _env_path('DYNAMIC_COMPONENT_CONFIG_FILE'))
    diagnostics: list[str] | None = _diagnostics


settings = Settings()
