from enum import IntEnum

from ..exceptions import UnknownRole


class LayerKind(IntEnum):
    """Role of a layer within a network."""
    INPUT = 1
    HIDDEN = 2
    OUTPUT = 3

    def __str__(self):
        return self.name

    @classmethod
    def name_of(cls, value):
        """Name of a known kind, "UNKNOWN" for anything else."""
        try:
            return cls.parse(value).name
        except UnknownRole:
            return "UNKNOWN"

    @classmethod
    def parse(cls, value):
        """Accepts a member, its int value or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnknownRole(f"Invalid layer kind requested: {value!r}", {"kind": value})
