from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

_DEFAULTS: dict[str, object] = {
    "display": {
        "precision": 3,
        "show_pitchers": True,
    },
}


def create_config(
    yaml_path: str = "baseball_stats.yaml",
    env_prefix: str = "BASEBALL_STATS",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g.
            ``BASEBALL_STATS__DISPLAY__PRECISION``.
        defaults: Default configuration values.
    """
    if defaults is None:
        defaults = _DEFAULTS

    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def display_precision(cfg: ConfigurationSet) -> int:
    # env vars arrive as strings
    return int(cfg["display.precision"])


def show_pitchers(cfg: ConfigurationSet) -> bool:
    value = cfg["display.show_pitchers"]
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
