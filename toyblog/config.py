from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_FILENAME = "toyblog.yml"

_PATH_FIELDS = ("index_template", "post_template", "posts_dir", "output_dir", "report_path")


class Config(BaseModel):
    index_template: Path = Field(description="Template file used for the index page.")
    post_template: Path = Field(description="Template file used for every post page.")
    posts_dir: Path = Field(description="Directory containing posts and other files to publish.")
    output_dir: Path = Field(description="Directory receiving the generated site.")
    clean: bool = Field(
        default=False,
        description="Clear the output directory before writing generated files.",
    )
    descending: bool = Field(
        default=True,
        description="Order navigation links newest first.",
    )
    strict: bool = Field(
        default=False,
        description=(
            "Reject whitespace-only titles and output filenames that collide "
            "when compared case-insensitively."
        ),
    )
    report_path: Path | None = Field(
        default=None,
        description="Optional location for a JSON build report.",
    )

    @field_validator("index_template", "post_template", "posts_dir", "output_dir", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("report_path", mode="before")
    def _ensure_optional_path(cls, value: Any) -> Path | None:
        if value is None or value == "":
            return None
        return Path(value)

    @property
    def posts_output_dir(self) -> Path:
        return self.output_dir / "posts"

    @property
    def index_output_path(self) -> Path:
        return self.output_dir / "index.html"


def read_config_file(path: str | Path) -> dict[str, Any]:
    """Read raw settings from a YAML file, resolving relative paths.

    ``path`` may point at the file itself or at a directory holding
    ``toyblog.yml``. Relative paths are interpreted against the directory that
    holds the config file.
    """
    candidate = Path(path)
    config_path = candidate / CONFIG_FILENAME if candidate.is_dir() else candidate
    if not config_path.exists():
        raise FileNotFoundError(config_path)

    with config_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration {config_path} must contain a mapping.")

    base_dir = config_path.parent.resolve()
    resolved = dict(data)
    for key in _PATH_FIELDS:
        value = resolved.get(key)
        if value is None or value == "":
            continue
        value_path = Path(value)
        resolved[key] = value_path if value_path.is_absolute() else (base_dir / value_path).resolve()
    return resolved


def load_config(path: str | Path | None = None, **overrides: Any) -> Config:
    """Build a `Config` from an optional YAML file plus explicit overrides.

    Overrides set to ``None`` are ignored so unset CLI options keep the file
    value or the field default.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    for key, value in overrides.items():
        if value is not None:
            data[key] = value
    return Config(**data)


class ConfigError(ValueError):
    """Raised when configured paths conflict with each other."""


def ensure_separate_output(config: Config) -> None:
    """Reject layouts where the posts source and the generated site overlap.

    Passthrough copies replace their destination and ``clean`` empties the
    whole output directory, so an overlap would delete source files.
    """
    source = config.posts_dir.resolve()
    target = config.posts_output_dir.resolve()
    if source == target or source.is_relative_to(target) or target.is_relative_to(source):
        raise ConfigError(
            f"Posts directory {config.posts_dir} overlaps the posts output directory "
            f"{config.posts_output_dir}; choose an output directory outside the posts source."
        )
    if config.clean and source.is_relative_to(config.output_dir.resolve()):
        raise ConfigError(
            f"Posts directory {config.posts_dir} is inside the output directory "
            f"{config.output_dir}, which --clean would empty."
        )
