"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from atomsmith.errors import ConfigurationError
from atomsmith.rules.defaults import DEFAULT_RULES
from atomsmith.rules.models import Rule

from .models import AtomsmithConfig


def load_config(cli_path: str | None = None) -> AtomsmithConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    An explicit CLI path must exist; the other locations are optional.
    """
    if cli_path and not Path(cli_path).exists():
        raise ConfigurationError(cli_path, "file not found")

    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./atomsmith.yaml"),
        Path.home() / ".atomsmith" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            raw = _read_yaml(path)
            if raw is None:
                continue
            if not isinstance(raw, dict):
                raise ConfigurationError(path, "top level must be a mapping")
            raw = _expand_env_vars(raw)
            try:
                return AtomsmithConfig(**raw)
            except ValidationError as e:
                raise ConfigurationError(path, str(e)) from e

    return AtomsmithConfig()


def load_rules(config: AtomsmithConfig) -> list[Rule]:
    """Return the default rule catalog merged with the configured rules file.

    Rules from the file replace defaults that share their matcher and are
    otherwise appended in file order.
    """
    if not config.rules_file:
        return list(DEFAULT_RULES)

    path = Path(config.rules_file)
    if not path.is_file():
        raise ConfigurationError(path, "rules file not found")

    raw = _read_yaml(path) or []
    if not isinstance(raw, list):
        raise ConfigurationError(path, "rules file must contain a list of rules")
    try:
        extra = [Rule(**entry) for entry in raw]
    except (TypeError, ValidationError) as e:
        raise ConfigurationError(path, str(e)) from e

    merged = {rule.matcher: rule for rule in DEFAULT_RULES}
    for rule in extra:
        merged[rule.matcher] = rule
    return list(merged.values())


def _read_yaml(path: Path) -> object:
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(path, f"invalid YAML: {e}") from e
    except OSError as e:
        raise ConfigurationError(path, str(e)) from e


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `atomsmith config init`
DEFAULT_CONFIG_TEMPLATE = """\
# atomsmith.yaml

# Classes generated even when no scanned file uses them
class_names: []

# Named values usable as rule arguments, e.g. C(brandColor)
custom:
  brandColor: "#0280ae"

# Breakpoint suffixes, e.g. D(n)--sm
breakpoints:
  sm: "@media screen and (min-width: 700px)"
  md: "@media screen and (min-width: 999px)"
  lg: "@media screen and (min-width: 1200px)"

# Glob patterns; patterns without "/" match the file name
exclude:
  - "*.min.js"

# Optional YAML list of extra or overriding rules
# rules_file: "atomsmith-rules.yaml"

# Descend into nested directories
recursive: false

# Output
output:
  path: null                   # null writes to stdout

# Generator
options:
  rtl: false
  namespace: null              # e.g. "#atomic"
  helpers_namespace: null
  ie: false                    # legacy-browser hacks

# Logging
log_level: "info"              # debug | info | warn | error
"""
