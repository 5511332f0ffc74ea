"""Configuration loading from pyproject.toml."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError


class ConfigError(Exception):
    """Error in matrixgraph configuration."""


class GraphConfig(BaseModel):
    """Behaviour switches for ``SimpleGraph``.

    Attributes:
        check_endpoints: Reject ``add_edge`` calls whose endpoints are not
            occupied node slots. Off by default, endpoints are trusted.
        lenient_edges_from: Return an empty list from ``edges_from`` for an
            empty or unknown node instead of raising.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    check_endpoints: bool = False
    lenient_edges_from: bool = False


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def load_config(pyproject_path: Path) -> GraphConfig:
    """Load and validate [tool.matrixgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphConfig; defaults when the section is absent.

    Raises:
        ConfigError: If the TOML is malformed or the section has unknown keys
            or wrongly typed values.

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("matrixgraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.matrixgraph] configuration. Expected a table."
        raise ConfigError(msg)

    try:
        # strict so that e.g. "yes" is not coerced to True
        return GraphConfig.model_validate(section, strict=True)
    except ValidationError as e:
        msg = f"Invalid [tool.matrixgraph] configuration in {pyproject_path}: {e}"
        raise ConfigError(msg) from e


def get_config() -> GraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphConfig (defaults if no pyproject.toml or no [tool.matrixgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphConfig()
    return load_config(pyproject_path)
