"""target-abi - C data model type sizes for cross-compilation tooling."""
from importlib.metadata import version, PackageNotFoundError

from target_abi.data_model import CDataModel, CTypeSizes, Size

try:
    __version__ = version("target-abi")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
    __dev__ = True

__all__ = ["CDataModel", "CTypeSizes", "Size", "__version__"]
