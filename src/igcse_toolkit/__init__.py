"""Top-level package for the IGCSE paper toolkit.

Provides subpackages:
- igcse_toolkit.core – immutable data models (questions, blueprints, selection)
- igcse_toolkit.bank – static question banks and paper blueprints
- igcse_toolkit.common – per-paper metadata and naming helpers
- igcse_toolkit.builder – selection, layout, drawing, rendering and audit
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("igcse-toolkit")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
