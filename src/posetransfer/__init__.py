"""PoseTransfer - re-pose a subject photo from a stick-figure pose cue."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("posetransfer")
except PackageNotFoundError:
    __version__ = "unknown"
