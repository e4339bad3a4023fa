"""
Security Playground Configuration Management
=============================================

Centralized configuration for the playground analyzers using Python
dataclasses and TOML-based persistence.

Heuristic weight tables (common passwords, keyboard patterns, scoring
weights, guess rates) live here as read-only data and are injected into
the analyzers at construction time.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Analyzer Configs ===============================


@dataclass(frozen=True, slots=True)
class PasswordConfig:
    """Dictionaries and attacker models used by password analysis.

    The guess rates model a single CPU, a single GPU and a distributed
    cracking rig respectively.
    """

    common_passwords: tuple[str, ...] = (
        "password", "123456", "qwerty", "abc123", "letmein", "welcome",
        "admin", "login", "master", "dragon", "monkey", "shadow",
        "sunshine", "princess", "football", "baseball", "superman",
        "batman", "trustno1", "iloveyou",
    )
    keyboard_patterns: tuple[str, ...] = (
        "qwerty", "asdfgh", "zxcvbn", "qazwsx", "123456", "098765",
        "abcdef", "aaaaaa", "bbbbbb", "111111",
    )
    # Prefixes penalised by the score engine
    weak_prefixes: tuple[str, ...] = ("123", "abc", "qwe")
    # Prefixes reported as "sequential characters"
    sequential_prefixes: tuple[str, ...] = ("123", "abc", "qwe", "000", "111")
    cpu_guesses_per_second: float = 1e7
    gpu_guesses_per_second: float = 1e11
    distributed_guesses_per_second: float = 1e13


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """Additive weights and subtractive penalties of the 0-100 score."""

    # (minimum length, bonus) -- tiers stack
    length_tiers: tuple[tuple[int, int], ...] = ((8, 10), (12, 15), (16, 15))
    lowercase_bonus: int = 10
    uppercase_bonus: int = 10
    digit_bonus: int = 10
    symbol_bonus: int = 15
    entropy_divisor: float = 3.0
    entropy_bonus_cap: float = 20.0
    common_password_penalty: int = 30
    keyboard_pattern_penalty: int = 20
    repeated_chars_penalty: int = 15
    weak_prefix_penalty: int = 15


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Alphabets used to assemble the password generation charset."""

    lowercase: str = "abcdefghijklmnopqrstuvwxyz"
    uppercase: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    digits: str = "0123456789"
    symbols: str = "!@#$%^&*()_+-=[]{}|;:,.<>?"
    ambiguous: str = "lIO0"
    default_length: int = 16
    # Rejection sampling instead of plain modulo reduction
    uniform_sampling: bool = False


@dataclass(frozen=True, slots=True)
class TokenConfig:
    """Token inspection thresholds."""

    max_lifetime_seconds: int = 86_400


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Logging and output settings shared by every command."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    console_logging: bool = True
    output_dir: str = "output"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PlaygroundConfig:
    """Master configuration aggregating all sections.

    Usage:
        >>> config = PlaygroundConfig.load()                  # default path
        >>> config = PlaygroundConfig.load("custom.toml")     # custom path
        >>> config.password.cpu_guesses_per_second
        10000000.0
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    password: PasswordConfig = field(default_factory=PasswordConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    token: TokenConfig = field(default_factory=TokenConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PlaygroundConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`PlaygroundConfig` instance.

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
            password=cls._build_section(PasswordConfig, raw.get("password", {})),
            scoring=cls._build_section(ScoringConfig, raw.get("scoring", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            token=cls._build_section(TokenConfig, raw.get("token", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys are ignored.  TOML arrays are frozen into tuples
        (recursively) so read-only sections stay hashable.
        """
        valid_keys = {f.name for f in fields(cls)}
        filtered = {
            k: _freeze(v) for k, v in data.items() if k in valid_keys
        }
        return cls(**filtered)


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> PlaygroundConfig:
    """Module-level convenience wrapper around :meth:`PlaygroundConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = PlaygroundConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
