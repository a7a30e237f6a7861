"""
Configuration loader for PDF Term Scan.

Loads settings from config.json and provides typed access via dataclasses.
Supports singleton pattern for global access and runtime reload capability.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .exceptions import ConfigurationError


CONFIG_ENV_VAR = "PDFSCAN_CONFIG"


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    logs_directory: Path


@dataclass
class ExtractionConfig:
    """Configuration for PDF extraction settings."""
    primary_backend: str
    fallback_backend: str
    supported_extensions: List[str]


@dataclass
class ScanConfig:
    """Configuration for term scanning defaults."""
    case_sensitive: bool
    literal_terms: bool
    term_separator: str
    error_summary_length: int


@dataclass
class GUIConfig:
    """Configuration for Streamlit web interface."""
    page_title: str


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    extraction: ExtractionConfig
    scan: ScanConfig
    gui: GUIConfig
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        project_root = config_path.parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def defaults(cls) -> "Config":
        """Build a Config from built-in defaults, rooted at the current directory."""
        return cls._parse_config({}, Path.cwd())

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = data.get("paths", {})
        paths = PathsConfig(
            logs_directory=cls._resolve_path(paths_data.get("logs_directory", "output/logs"), project_root)
        )

        ext_data = data.get("extraction", {})
        extraction = ExtractionConfig(
            primary_backend=ext_data.get("primary_backend", "pypdf"),
            fallback_backend=ext_data.get("fallback_backend", "pdfplumber"),
            supported_extensions=ext_data.get("supported_extensions", [".pdf"])
        )

        scan_data = data.get("scan", {})
        separator = scan_data.get("term_separator", ";")
        if not separator:
            raise ConfigurationError(
                "scan.term_separator must not be empty",
                {"section": "scan"}
            )
        scan = ScanConfig(
            case_sensitive=scan_data.get("case_sensitive", False),
            literal_terms=scan_data.get("literal_terms", False),
            term_separator=separator,
            error_summary_length=scan_data.get("error_summary_length", 200)
        )

        gui_data = data.get("gui", {})
        gui = GUIConfig(
            page_title=gui_data.get("page_title", "PDF Term Scan")
        )

        log_data = data.get("logging", {})
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "INFO"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        return cls(
            paths=paths,
            extraction=extraction,
            scan=scan,
            gui=gui,
            logging=logging_cfg,
            project_root=project_root
        )

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        _config_instance = Config.from_file(config_path)

    return _config_instance


def _find_config_file() -> Path:
    """
    Locate config.json.

    The PDFSCAN_CONFIG environment variable wins when set; otherwise
    search upward from current directory for config/config.json.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigurationError(
        "Could not find config/config.json in current directory or parents"
    )


def get_config_or_defaults() -> Config:
    """
    Get the singleton Config, falling back to built-in defaults.

    Scanning works without a config file; only explicit config paths
    are required to exist.

    Returns:
        The loaded Config, or a defaults-only Config when none is found.
    """
    global _config_instance

    try:
        return get_config()
    except ConfigurationError:
        _config_instance = Config.defaults()
        return _config_instance


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Logs directory: {config.paths.logs_directory}")
        print(f"Primary backend: {config.extraction.primary_backend}")
        print(f"Case sensitive by default: {config.scan.case_sensitive}")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
