"""deps-report package for dependency license reports."""


def _get_version() -> str:
    """Get package version with fallback mechanisms."""
    from importlib.metadata import PackageNotFoundError, version
    from pathlib import Path

    # Method 1: installed package metadata
    try:
        return version("deps-report")
    except PackageNotFoundError:
        pass

    # Method 2: pyproject.toml of a source checkout (tomllib needs 3.11+)
    try:
        import tomllib
    except ImportError:
        return "unknown"

    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return "unknown"
    return pyproject_data.get("project", {}).get("version", "unknown")


__version__ = _get_version()
