"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

@dataclass
class EasyMarkConfig:
    """Configuration for rendering EasyMark documents in a terminal.

    Attributes:
        bullet: Marker shown for ``- `` list items.
        quote_bar: Bar drawn once per quote level.
        separator_char: Character repeated to draw a ``---`` rule.
        separator_width: Number of `separator_char` repetitions in a rule.
        code_indent: Spaces placed before each line of a fenced code block.
        code_color: Click color name used for inline code and code blocks.
        show_urls: Whether to print a link's URL after its title.
        max_file_size: Maximum file size in bytes that will be read.

    Examples:
        EasyMarkConfig(bullet="*", separator_width=60)
    """

    # Markers
    bullet: str = "•"
    quote_bar: str = "│"
    separator_char: str = "─"
    separator_width: int = 40

    # Code
    code_indent: int = 4
    code_color: str = "cyan"

    # Links
    show_urls: bool = True

    # Limits
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`separator_width` must be a positive integer")
    """


def load_config(search_path: Path) -> EasyMarkConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.easymark]`` table from `pyproject.toml` and the ``[easymark]``
    or ``[tool.easymark]`` table from `.easymark.toml` when present. Returns
    default values when no configuration is found. TOML files that cannot be
    read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        EasyMarkConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If a matching table is not a mapping or contains unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "easymark")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".easymark.toml",
            table_paths=[("easymark",), ("tool", "easymark")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return EasyMarkConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> EasyMarkConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> EasyMarkConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return EasyMarkConfig()

    try:
        return EasyMarkConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: EasyMarkConfig) -> None:
    """Validate an `EasyMarkConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If markers are empty or of the wrong type, numeric fields
            are not positive integers, or `show_urls` is not a boolean.

    Examples:
        validate_config(EasyMarkConfig(separator_width=20))
    """
    for name in ("bullet", "quote_bar", "separator_char", "code_color"):
        value = getattr(config, name)
        if not isinstance(value, str) or not value:
            raise ConfigError(f"`{name}` must be a non-empty string")

    _ensure_integers(
        {
            "separator_width": config.separator_width,
            "code_indent": config.code_indent,
            "max_file_size": config.max_file_size,
        }
    )
    _ensure_positive(
        {
            "separator_width": config.separator_width,
            "max_file_size": config.max_file_size,
        }
    )
    if config.code_indent < 0:
        raise ConfigError("`code_indent` must be >= 0")

    if not isinstance(config.show_urls, bool):
        raise ConfigError("`show_urls` must be a boolean")


def apply_overrides(config: EasyMarkConfig, **overrides: object) -> EasyMarkConfig:
    """Apply override values to an `EasyMarkConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        EasyMarkConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `EasyMarkConfig`.

    Examples:
        updated = apply_overrides(config, bullet="*", show_urls=False)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> EasyMarkConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        EasyMarkConfig: Validated configuration ready for rendering.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), bullet="-", separator_width=60)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
