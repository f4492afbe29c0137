"""YAML-backed collection of SSHFP records indexed by owner name."""
from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from dnslib import RR

from .dnslib_bridge import to_rr
from .errors import RDataError
from .interchange import from_mapping, to_presentation
from .records import ZoneEntry

logger = logging.getLogger(__name__)

DEFAULT_TTL = 300


def parse_entry(position: int, item: Any, default_ttl: int) -> ZoneEntry:
    """Turn one item of the ``records`` list into a `ZoneEntry`.

    The RDATA keys go through `from_mapping`, so the same rules apply as for
    any generic payload.

    Raises:
        ValueError: Naming the 1-based `position` of the bad item.
    """
    if not isinstance(item, dict):
        raise ValueError(f"record #{position}: mapping required, got {type(item).__name__}")
    if "name" not in item:
        raise ValueError(f"record #{position}: owner name is required")
    name = str(item["name"]).strip()
    if not name.endswith("."):
        raise ValueError(f"record #{position}: name must end with '.' (got {name!r})")
    try:
        ttl = int(item.get("ttl", default_ttl))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"record #{position}: invalid ttl: {exc}") from exc
    try:
        rdata = from_mapping(item)
    except RDataError as exc:
        raise ValueError(f"record #{position}: {exc}") from exc
    return ZoneEntry(name=name, ttl=ttl, rdata=rdata)


def parse_zone(data: Any) -> tuple[int, list[ZoneEntry]]:
    """Validate a decoded zone document.

    Args:
        data: Result of ``yaml.safe_load``; None stands for an empty zone.

    Returns:
        Tuple of (default_ttl, entries in document order).

    Raises:
        ValueError: On a malformed document or record.
    """
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError("top level must be a mapping")
    try:
        default_ttl = int(data.get("default_ttl", DEFAULT_TTL))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid default_ttl: {exc}") from exc
    raw = data.get("records", [])
    if not isinstance(raw, list):
        raise ValueError("'records' must be a list")
    return default_ttl, [parse_entry(i, item, default_ttl) for i, item in enumerate(raw, 1)]


class Zone:
    """SSHFP records read from a YAML file, indexed by owner name.

    Args:
        path: Filesystem path to the YAML zone.

    Attributes:
        path: Path to the YAML zone file.
        default_ttl: TTL applied to records without explicit TTL.
        entries: Parsed entries, in file order.
        index: Entries keyed by lowercased owner name.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._mtime = 0.0
        self.default_ttl = DEFAULT_TTL
        self.entries: list[ZoneEntry] = []
        self.index: dict[str, list[ZoneEntry]] = {}
        self.load(force=True)

    def load(self, force: bool = False) -> None:
        """Read the zone file if it changed since the last load.

        Args:
            force: Read even if the modification time is unchanged.

        Raises:
            ValueError: On invalid YAML or record data.
            FileNotFoundError: If the file is missing and `force=True`.
        """
        try:
            mtime = os.stat(self.path).st_mtime
        except FileNotFoundError:
            if force:
                raise
            return
        if not force and mtime <= self._mtime:
            return

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                default_ttl, entries = parse_zone(yaml.safe_load(f))
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML parsing error: {exc}") from exc

        index: dict[str, list[ZoneEntry]] = {}
        for entry in entries:
            index.setdefault(entry.name.lower(), []).append(entry)

        self.default_ttl = default_ttl
        self.entries = entries
        self.index = index
        self._mtime = mtime
        logger.info("zone %s loaded: %d SSHFP records", self.path, len(entries))

    def maybe_reload(self) -> None:
        """Reload on mtime change; keep the last good zone on errors."""
        try:
            self.load(force=False)
        except (ValueError, OSError) as exc:
            logger.error("failed to reload zone %s: %s", self.path, exc)

    def lookup(self, name: str) -> list[ZoneEntry]:
        """Return the entries owned by `name` (case-insensitive)."""
        return list(self.index.get(name.lower(), []))

    def to_rrs(self, name: str) -> list[RR]:
        """Build `dnslib.RR` objects for `name`.

        Entries dnslib cannot carry (non-hex fingerprint, algorithm or fptype
        above 255) are skipped with a warning.

        Args:
            name: FQDN with trailing dot.

        Returns:
            List of `RR` objects for the given name.
        """
        out: list[RR] = []
        for entry in self.lookup(name):
            try:
                out.append(to_rr(entry.name, entry.rdata, entry.ttl))
            except RDataError as exc:
                logger.warning("SSHFP record skipped: %s %s: %s", entry.name, to_presentation(entry.rdata), exc)
        return out
