"""
EntPass Configuration Management
=================================

Centralized configuration for the EntPass toolkit using Python dataclasses
and TOML-based persistence. Every value can be overridden from the command
line; the file only changes the defaults.

Example ``config.toml``::

    [global]
    log_level = "INFO"
    log_file = "entpass.log"

    [generator]
    length = 24
    exclude = "O0Il1"
    min_entropy = "60"
    sample_size = 250000

References:
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the EntPass root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class GeneratorSettings:
    """Default generation settings.

    ``length = 0`` means "mode default": 17 characters, or 5 words in word
    mode. An empty ``wordlist_path`` selects the bundled English list.
    """

    length: int = 0
    quantity: int = 1
    words: bool = False
    symbols: str = "!@#$%^&*()_+=-[]\\{}|;':,./<>?"
    word_separators: str = "!@#$%^&*()_+1234567890-=,.></?;:[]|"
    exclude: str = ""
    min_entropy: str = "avg"
    sample_size: int = 100_000
    apply_threshold_codes: bool = False
    wordlist_path: str = ""


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging, worker pool size and debug mode.

    ``max_workers = 0`` uses the host's available parallelism.
    """

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    max_workers: int = 0
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class EntPassConfig:
    """Master configuration aggregating global and generator settings.

    Usage:
        >>> config = EntPassConfig.load()                  # from default path
        >>> config = EntPassConfig.load("custom.toml")     # from custom path
        >>> print(config.generator.min_entropy)
        'avg'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorSettings = field(default_factory=GeneratorSettings)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> EntPassConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        EntPass project root. Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`EntPassConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorSettings, raw.get("generator", {})),
        )

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

