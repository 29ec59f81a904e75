"""Load the built-in preset poses from the bundled JSON catalog."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import TypeAdapter

from posetransfer.models.pose import Preset

logger = logging.getLogger(__name__)

# Catalog file shipped alongside this module.
_CATALOG_PATH = Path(__file__).resolve().parent / "presets.json"

_PRESET_LIST = TypeAdapter(tuple[Preset, ...])


class PresetNotFoundError(LookupError):
    """Raised when no preset matches the requested name."""


@lru_cache(maxsize=1)
def _catalog() -> tuple[Preset, ...]:
    data = json.loads(_CATALOG_PATH.read_text(encoding="utf-8"))
    presets = _PRESET_LIST.validate_python(data)
    logger.debug("Loaded %d preset poses from %s", len(presets), _CATALOG_PATH.name)
    return presets


def available_presets() -> list[str]:
    """Return preset names in catalog order."""
    return [p.name for p in _catalog()]


def all_presets() -> tuple[Preset, ...]:
    return _catalog()


def load(name: str) -> Preset:
    """Look up a preset by name.

    Parameters
    ----------
    name:
        Preset name, case-insensitive, e.g. ``"Waving"`` or ``"lying down"``.

    Returns
    -------
    Preset
        The shared, frozen catalog entry. Callers that want to edit the pose
        must go through :meth:`Preset.to_graph` or
        :meth:`PoseGraph.replace_all`, which copy the joints.

    Raises
    ------
    PresetNotFoundError
        If no preset has that name.
    """
    wanted = name.strip().casefold()
    for preset in _catalog():
        if preset.name.casefold() == wanted:
            return preset
    msg = f"Unknown preset '{name}' (available: {', '.join(available_presets())})"
    raise PresetNotFoundError(msg)
