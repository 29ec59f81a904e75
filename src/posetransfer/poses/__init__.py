"""Built-in preset poses for the pose editor."""

from posetransfer.poses.loader import PresetNotFoundError, all_presets, available_presets, load

__all__ = ["PresetNotFoundError", "all_presets", "available_presets", "load"]
