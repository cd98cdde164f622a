"""Zone enumeration and its fixed backend code table."""

from enum import Enum


class Zone(Enum):
    """Geographic partition used to scope station and facility queries."""

    ALL = "All"
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    CENTRAL = "Central"
    HOWRAH = "Howrah"

    @property
    def code(self) -> str | None:
        """Backend zone code, or None for the unscoped ALL view."""
        return ZONE_CODES[self]

    @property
    def is_scoped(self) -> bool:
        return self is not Zone.ALL

    @classmethod
    def from_name(cls, name: str) -> "Zone":
        """Look up a zone by its display name, case-insensitively.

        Raises:
            ValueError: If no zone has that name.
        """
        for zone in cls:
            if zone.value.lower() == name.strip().lower():
                return zone
        valid = ", ".join(zone.value for zone in cls)
        raise ValueError(f"Unknown zone '{name}'. Valid zones: {valid}")


ZONE_CODES: dict[Zone, str | None] = {
    Zone.ALL: None,
    Zone.NORTH: "NORTH",
    Zone.SOUTH: "SOUTH",
    Zone.EAST: "EAST",
    Zone.CENTRAL: "CENTRAL",
    Zone.HOWRAH: "HOWRAH",
}

_missing = set(Zone) - set(ZONE_CODES)
if _missing:
    missing_names = sorted(zone.value for zone in _missing)
    raise RuntimeError(f"Zone code table is missing entries for {missing_names}")
if any(code is None for zone, code in ZONE_CODES.items() if zone is not Zone.ALL):
    raise RuntimeError("Every scoped zone needs a backend code")
