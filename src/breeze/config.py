"""Config file: the BreezeConfig dataclass and its JSON loader."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from breeze.collect import CollectionOption

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "breeze.config.json"


class ConfigError(Exception):
    """Raised when a config file parses but holds an invalid value."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


@dataclass(frozen=True)
class BreezeConfig:
    content: tuple[str, ...] = ("index.html",)
    output: str = "breeze.css"
    # file extension -> collection option name, e.g. {"rs": "html"}
    extend_collection_options: dict[str, str] = field(default_factory=dict)

    def collection_overrides(self) -> dict[str, CollectionOption]:
        return {
            ext.lstrip(".").lower(): CollectionOption(name)
            for ext, name in self.extend_collection_options.items()
        }

    def to_json(self) -> str:
        data = asdict(self)
        data["content"] = list(self.content)
        return json.dumps(data, indent=2) + "\n"


def config_from_dict(data: dict[str, Any]) -> BreezeConfig:
    """Build a config from parsed JSON, validating each field."""
    default = BreezeConfig()
    content = data.get("content", list(default.content))
    if isinstance(content, str):
        content = [content]
    if not isinstance(content, list) or not all(isinstance(c, str) for c in content):
        raise ConfigError("'content' must be a list of path patterns", field="content")

    output = data.get("output", default.output)
    if not isinstance(output, str) or not output:
        raise ConfigError("'output' must be a non-empty string", field="output")

    options = data.get("extend_collection_options") or {}
    if not isinstance(options, dict):
        raise ConfigError(
            "'extend_collection_options' must map extensions to option names",
            field="extend_collection_options",
        )
    valid = {o.value for o in CollectionOption}
    for ext, name in options.items():
        if not isinstance(name, str) or name.lower() not in valid:
            raise ConfigError(
                f"Unknown collection option {name!r} for extension {ext!r}; "
                f"expected one of {sorted(valid)}",
                field="extend_collection_options",
            )

    return BreezeConfig(
        content=tuple(content),
        output=output,
        extend_collection_options={k: v.lower() for k, v in options.items()},
    )


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> BreezeConfig:
    """Load a JSON config file, using defaults when it is missing or unreadable.

    Raises:
        ConfigError: if the file is valid JSON but a field value is invalid.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not read config %s: %s. Using default config.", config_path, exc)
        return BreezeConfig()
    try:
        data = json.loads(text)
    except ValueError as exc:
        logger.warning("Failed to parse config %s: %s. Using default config.", config_path, exc)
        return BreezeConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config must be a JSON object")
    return config_from_dict(data)


def default_config_json() -> str:
    return BreezeConfig().to_json()
