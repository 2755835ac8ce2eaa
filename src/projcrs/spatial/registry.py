# src/projcrs/spatial/registry.py
from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping, Optional, Tuple

from projcrs.errors import DefinitionNotFound

log = logging.getLogger(__name__)

# PROJ strings registered out of the box (plus the usual aliases)
WGS84_DEF = "+proj=longlat +datum=WGS84 +no_defs"
NAD83_DEF = "+proj=longlat +ellps=GRS80 +datum=NAD83 +no_defs"
PSEUDO_MERCATOR_DEF = (
    "+proj=merc +a=6378137 +b=6378137 +lat_ts=0 +lon_0=0 "
    "+x_0=0 +y_0=0 +k=1 +units=m +nadgrids=@null +no_defs"
)

DEFAULT_DEFINITIONS: Dict[str, str] = {
    "EPSG:4326": WGS84_DEF,
    "WGS84": WGS84_DEF,
    "EPSG:4269": NAD83_DEF,
    "EPSG:3857": PSEUDO_MERCATOR_DEF,
    "EPSG:3785": PSEUDO_MERCATOR_DEF,
    "GOOGLE": PSEUDO_MERCATOR_DEF,
    "EPSG:900913": PSEUDO_MERCATOR_DEF,
    "EPSG:102113": PSEUDO_MERCATOR_DEF,
}


def shorten_urn(code: str) -> str:
    """
    'urn:ogc:def:crs:EPSG::4326' -> 'EPSG:4326'

    Codes with 3 or fewer ':'-segments come back unchanged.
    """
    parts = code.split(":")
    if len(parts) > 3:
        return f"{parts[-3]}:{parts[-1]}"
    return code


class DefinitionRegistry:
    """
    Code -> projection definition text (PROJ string, WKT, 'EPSG:xxxx', ...).

    Append/lookup only. define() on an existing code replaces it (last write wins).
    Not safe under unsynchronized concurrent writers; give each thread/test its
    own registry or serialize define() calls.
    """

    def __init__(self, definitions: Optional[Mapping[str, str]] = None) -> None:
        self._defs: Dict[str, str] = {}
        for code, text in (definitions or {}).items():
            self.define(code, text)

    def define(self, code: str, definition: str) -> None:
        prev = self._defs.get(code)
        if prev is not None and prev != definition:
            log.warning("replacing projection definition for %s", code)
        self._defs[code] = definition
        log.debug("defined %s = %s", code, definition)

    def get(self, code: str) -> Optional[str]:
        return self._defs.get(code)

    def resolve(self, code: str) -> Tuple[str, str]:
        """
        Returns (key, definition) for `code`, trying the URN-shortened key
        when the code itself is unknown. Raises DefinitionNotFound.
        """
        if code in self._defs:
            return code, self._defs[code]

        key = shorten_urn(code)
        if key != code:
            log.debug("shortened %s -> %s", code, key)

        if key not in self._defs:
            raise DefinitionNotFound(code, key)
        return key, self._defs[key]

    def codes(self) -> Tuple[str, ...]:
        return tuple(self._defs)

    def __contains__(self, code: object) -> bool:
        return code in self._defs

    def __iter__(self) -> Iterator[str]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)


def default_registry() -> DefinitionRegistry:
    """Fresh registry holding DEFAULT_DEFINITIONS."""
    return DefinitionRegistry(DEFAULT_DEFINITIONS)


_SHARED: Optional[DefinitionRegistry] = None


def shared_registry() -> DefinitionRegistry:
    """
    Process-wide registry used when no registry is passed explicitly.
    Anything defined here is visible to every later construction in the process.
    """
    global _SHARED
    if _SHARED is None:
        _SHARED = default_registry()
    return _SHARED
