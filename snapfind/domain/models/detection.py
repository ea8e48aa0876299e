from dataclasses import dataclass


@dataclass(frozen=True)
class Detection:
    """One object reported by the vision API, positioned in percent (0-100)"""

    name: str
    x: float
    y: float
