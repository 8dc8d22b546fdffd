import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    WORDLIST_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 3
    SHOW_BEST_WORDS: bool = False
    PATH_SEPARATOR: str = " -> "
    MAX_STATES: int = 0

    DEBUG: bool = False
    HOST: str = "127.0.0.1"
    PORT: int = 10001

    def __post_init__(self):
        self.WORDLIST_PATH = self.BASE_DIR / "wordlist.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, bool):
                    setattr(self, fld, env_val.lower() in ("1", "true", "yes"))
                elif isinstance(current, int):
                    setattr(self, fld, int(env_val))
                elif isinstance(current, Path):
                    setattr(self, fld, Path(env_val))
                else:
                    setattr(self, fld, env_val)

        if "WORDLIST_PATH" not in os.environ:
            self.WORDLIST_PATH = self.BASE_DIR / "wordlist.txt"


# Fields that may be changed at runtime through /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "SHOW_BEST_WORDS": bool,
    "PATH_SEPARATOR": str,
    "MAX_STATES": int,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def coerce_field(kind: type, value):
    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        raise ValueError(f"expected bool, got {value!r}")
    if kind is int:
        if isinstance(value, bool):
            raise ValueError(f"expected int, got {value!r}")
        result = int(value)
        if result < 0:
            raise ValueError(f"must be non-negative, got {result}")
        return result
    return str(value)


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to cfg. Returns per-field errors; valid fields are applied regardless."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if name in cfg.__dataclass_fields__:
                errors[name] = "field is not editable"
            else:
                errors[name] = "unknown field"
            continue
        try:
            setattr(cfg, name, coerce_field(EDITABLE_FIELDS[name], value))
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
    return errors


settings = Settings()
