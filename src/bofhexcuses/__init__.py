"""BOFH Excuse Generator."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("bofhexcuses")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
