"""Configuration helpers for the outfit stylist app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_MAX_ITEMS_PER_CATEGORY = 5
DEFAULT_MAX_COMBINATIONS_PER_SKELETON = 100
DEFAULT_MAX_RECOMMENDATIONS = 10
DEFAULT_QUICK_SUGGESTIONS = 3
DEFAULT_PORT = 8080


@dataclass
class StylistConfig:
    """Tunable values for the recommendation engine and its storage.

    The enumeration caps bound the work done per request regardless of
    wardrobe size; tests shrink them to exercise truncation with small
    fixtures.
    """

    max_items_per_category: int = DEFAULT_MAX_ITEMS_PER_CATEGORY
    max_combinations_per_skeleton: int = DEFAULT_MAX_COMBINATIONS_PER_SKELETON
    max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS
    quick_suggestions: int = DEFAULT_QUICK_SUGGESTIONS
    wardrobe_backend: str = "memory"
    wardrobe_db_path: Optional[str] = None
    log_level: str = "INFO"
    port: int = DEFAULT_PORT
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment file.

        Environment specific files live in ``config/environments/<env>.yaml``
        by default. Environment variables take precedence over file values.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        file_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            file_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, file_config.get(key, default))

        def get_int(key: str, default: int) -> int:
            raw = get_value(key)
            if raw in (None, ""):
                return default
            try:
                value = int(raw)
            except ValueError as exc:
                raise ValueError(f"Config value '{key}' must be an integer, got {raw!r}") from exc
            if value < 1:
                raise ValueError(f"Config value '{key}' must be positive, got {value}")
            return value

        backend = str(get_value("wardrobe_backend", "memory") or "memory").lower()
        if backend not in {"memory", "sqlite"}:
            raise ValueError(f"Unsupported wardrobe backend '{backend}'")

        return cls(
            max_items_per_category=get_int("max_items_per_category", DEFAULT_MAX_ITEMS_PER_CATEGORY),
            max_combinations_per_skeleton=get_int(
                "max_combinations_per_skeleton", DEFAULT_MAX_COMBINATIONS_PER_SKELETON
            ),
            max_recommendations=get_int("max_recommendations", DEFAULT_MAX_RECOMMENDATIONS),
            quick_suggestions=get_int("quick_suggestions", DEFAULT_QUICK_SUGGESTIONS),
            wardrobe_backend=backend,
            wardrobe_db_path=get_value("wardrobe_db_path"),
            log_level=str(get_value("log_level", "INFO") or "INFO"),
            port=get_int("port", DEFAULT_PORT),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
