from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Suite config loader.

Responsibilities:
- Load YAML config/suite.yml
- Validate against the bundled JSON schema (suite_schema.json)
- Apply defaults for the optional upload / browser sections
- Resolve login credentials (environment first, then the config file)
"""

SCHEMA_PATH = Path(__file__).with_name("suite_schema.json")

DEFAULT_CONFIG_PATH = Path("config/suite.yml")

EMAIL_ENV = "SUITE_EMAIL"
PASSWORD_ENV = "SUITE_PASSWORD"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class UploadSettings:
    input_selector: str = "input[type=file]"
    filename_label: str = "label.filename-label"
    temp_file_name: str = "temp.xlsx"


@dataclass(frozen=True)
class BrowserSettings:
    headless: bool = True
    timeout_ms: int = 30_000


@dataclass(frozen=True)
class Credentials:
    email: str | None
    password: str | None


@dataclass(frozen=True)
class SuiteConfig:
    base_url: str
    fixtures_dir: Path
    temp_dir: Path
    upload: UploadSettings = field(default_factory=UploadSettings)
    browser: BrowserSettings = field(default_factory=BrowserSettings)
    credentials: Credentials = field(default_factory=lambda: Credentials(None, None))

    @property
    def temp_file_path(self) -> Path:
        return self.temp_dir / self.upload.temp_file_name


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing/invalid, or the data fails validation
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def resolve_credentials(cfg_raw: dict[str, Any] | None) -> Credentials:
    """Environment variables win over the config file (.env is loaded by the caller)."""
    cfg_raw = cfg_raw or {}
    return Credentials(
        email=os.getenv(EMAIL_ENV) or cfg_raw.get("email"),
        password=os.getenv(PASSWORD_ENV) or cfg_raw.get("password"),
    )


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> SuiteConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config validation failed: top level must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    upload = UploadSettings(**(data.get("upload") or {}))
    browser = BrowserSettings(**(data.get("browser") or {}))
    # 相対パスは設定ファイルの場所ではなく CWD 基準 (pytest / CLI はリポジトリ直下で実行)
    return SuiteConfig(
        base_url=data["base_url"].rstrip("/"),
        fixtures_dir=Path(data["fixtures_dir"]),
        temp_dir=Path(data["temp_dir"]),
        upload=upload,
        browser=browser,
        credentials=resolve_credentials(data.get("credentials")),
    )
