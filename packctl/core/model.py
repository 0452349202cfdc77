from dataclasses import dataclass, asdict
from typing import Any


@dataclass
class Reply:
    """
    Outcome of a packctl command, handed to a Renderer for display.
    """
    type: str
    """
    kind of reply, e.g. "ok", "error"
    """

    data: dict[str, Any]
    """
    A dictionary of plain, renderable values
    """

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
