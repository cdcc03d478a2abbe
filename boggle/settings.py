import os
from dataclasses import dataclass
from pathlib import Path

SUPPORTED_GRID_SIZES = (4, 5)


class ConfigError(ValueError):
    """Raised for settings the game cannot start with."""


@dataclass
class Settings:
    DICTIONARY_PATH: Path = Path("/usr/share/dict/american-english")

    GRID_SIZE: int = 4
    TIME_LIMIT: int = 180  # seconds
    QUIT_WORD: str = "QQ"

    COACH: bool = False
    COACH_MIN_SCORE: int = 2

    SEED: int = -1  # -1 means seed from the OS
    DEBUG: bool = False

    def __post_init__(self):
        # Override from environment
        errors = {}
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                try:
                    setattr(self, fld, _coerce(getattr(self, fld), env_val))
                except ValueError as e:
                    errors[fld] = str(e)
        if errors:
            raise ConfigError(f"Invalid environment settings: {errors}")


# Fields the command line is allowed to change, with their expected type
EDITABLE_FIELDS: dict[str, type] = {
    "DICTIONARY_PATH": Path,
    "GRID_SIZE": int,
    "TIME_LIMIT": int,
    "COACH": bool,
    "SEED": int,
    "DEBUG": bool,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return value


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable overrides to cfg.

    Valid fields are applied even when others fail. Returns a mapping of
    field name to error message for the ones that were rejected.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "not an editable setting"
            continue
        try:
            setattr(cfg, name, _coerce(getattr(cfg, name), value))
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid {EDITABLE_FIELDS[name].__name__}: {e}"
    return errors


def validate_settings(cfg: Settings) -> None:
    if cfg.GRID_SIZE not in SUPPORTED_GRID_SIZES:
        raise ConfigError(
            f"Unsupported grid size {cfg.GRID_SIZE} (expected one of {SUPPORTED_GRID_SIZES})"
        )
    if cfg.TIME_LIMIT <= 0:
        raise ConfigError(f"Time limit must be positive, got {cfg.TIME_LIMIT}")
    if not cfg.QUIT_WORD.strip():
        raise ConfigError("Quit word must not be empty")

