"""strixt configuration management.

Handles persistent settings stored in ~/.strixt/config.json
"""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path


# Verbosity levels
QUIET = 0
INFO = 1
VERBOSE = 2

# Default configuration values
DEFAULT_TABS_ALLOWED = False
DEFAULT_VERBOSITY = INFO
DEFAULT_MAX_TEXT_FILE_SIZE = 64 * 1024  # files beyond this are only partially scanned
DEFAULT_MAX_SHOWN_PEEVES_PER_FILE = 20
DEFAULT_OUTPUT_FORMAT = "text"  # text, json, yaml
DEFAULT_JOBS = 1

OUTPUT_FORMAT_OPTIONS = [
    ("text", "path:line:column: error: message"),
    ("json", "JSON report"),
    ("yaml", "YAML report"),
]


@dataclass(frozen=True)
class ScanOptions:
    """Immutable options shared by every file scan of a run."""

    tabs_allowed: bool = DEFAULT_TABS_ALLOWED
    verbosity: int = DEFAULT_VERBOSITY
    max_text_file_size: int = DEFAULT_MAX_TEXT_FILE_SIZE
    max_shown_peeves_per_file: int = DEFAULT_MAX_SHOWN_PEEVES_PER_FILE


@dataclass
class StrixtConfig:
    """strixt user configuration."""

    # Scanning
    tabs_allowed: bool = DEFAULT_TABS_ALLOWED
    max_text_file_size: int = DEFAULT_MAX_TEXT_FILE_SIZE

    # Reporting
    verbosity: int = DEFAULT_VERBOSITY
    max_shown_peeves_per_file: int = DEFAULT_MAX_SHOWN_PEEVES_PER_FILE
    output_format: str = DEFAULT_OUTPUT_FORMAT

    # Parallel file scans
    jobs: int = DEFAULT_JOBS

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the config file."""
        return Path.home() / ".strixt" / "config.json"

    @classmethod
    def load(cls) -> "StrixtConfig":
        """Load configuration from file, or return defaults if not found."""
        config_path = cls.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                # Only use known fields to avoid issues with old config versions
                known_fields = {f.name for f in fields(cls)}
                filtered_data = {k: v for k, v in data.items() if k in known_fields}
                config = cls(**filtered_data)
                config.validate()
                return config
            except (json.JSONDecodeError, AttributeError, TypeError, ValueError):
                # Invalid config, return defaults
                pass

        return cls()

    def save(self) -> None:
        """Save configuration to file."""
        config_path = self.get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self.tabs_allowed = DEFAULT_TABS_ALLOWED
        self.max_text_file_size = DEFAULT_MAX_TEXT_FILE_SIZE
        self.verbosity = DEFAULT_VERBOSITY
        self.max_shown_peeves_per_file = DEFAULT_MAX_SHOWN_PEEVES_PER_FILE
        self.output_format = DEFAULT_OUTPUT_FORMAT
        self.jobs = DEFAULT_JOBS

    def validate(self) -> None:
        """Raise ValueError if any value is out of range."""
        if not isinstance(self.tabs_allowed, bool):
            raise ValueError("tabs_allowed must be true or false")
        for name in ("verbosity", "max_text_file_size", "max_shown_peeves_per_file", "jobs"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer")
        if self.verbosity not in (QUIET, INFO, VERBOSE):
            raise ValueError(f"verbosity must be {QUIET}, {INFO} or {VERBOSE}")
        if self.max_text_file_size < 1:
            raise ValueError("max_text_file_size must be positive")
        if self.max_shown_peeves_per_file < 0:
            raise ValueError("max_shown_peeves_per_file must not be negative")
        if self.output_format not in {name for name, _ in OUTPUT_FORMAT_OPTIONS}:
            raise ValueError(f"Unknown output format: {self.output_format}")
        if self.jobs < 1:
            raise ValueError("jobs must be at least 1")

    def set_value(self, key: str, raw: str) -> None:
        """Set ``key`` from its command-line string form."""
        if key not in {f.name for f in fields(self)}:
            raise ValueError(f"Unknown config key: {key}")

        current = getattr(self, key)
        if isinstance(current, bool):
            lowered = raw.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                value: object = True
            elif lowered in ("0", "false", "no", "off"):
                value = False
            else:
                raise ValueError(f"Expected a boolean for {key}, got {raw!r}")
        elif isinstance(current, int):
            try:
                value = int(raw)
            except ValueError:
                raise ValueError(f"Expected an integer for {key}, got {raw!r}") from None
        else:
            value = raw

        previous = current
        setattr(self, key, value)
        try:
            self.validate()
        except ValueError:
            setattr(self, key, previous)
            raise

    def scan_options(self) -> ScanOptions:
        """Freeze the values the scanner and walker need."""
        return ScanOptions(
            tabs_allowed=self.tabs_allowed,
            verbosity=self.verbosity,
            max_text_file_size=self.max_text_file_size,
            max_shown_peeves_per_file=self.max_shown_peeves_per_file,
        )
