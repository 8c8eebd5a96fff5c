"""Top-level package for Title-Link Copy.

Provides subpackages:
- title_link_copy.titlecase – AP-style headline title casing
- title_link_copy.clipboard – copy formatting, actions and clipboard writer
- title_link_copy.common – shared options record
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text(encoding="utf-8")
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "1.4.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("title-link-copy")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from title_link_copy.titlecase import ap_style_title_case  # noqa: E402

__all__: list[str] = ["__version__", "ap_style_title_case"]
