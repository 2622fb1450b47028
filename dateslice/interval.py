from dataclasses import dataclass
from datetime import datetime

from typing_extensions import override


@dataclass(frozen=True, kw_only=True)
class Slice:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Slice start ({self.start.isoformat()}) must be <= "
                f"end ({self.end.isoformat()})"
            )

    @override
    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        duration = int(self.end.timestamp() - self.start.timestamp())
        return f"Slice({self.start.isoformat()}→{self.end.isoformat()}, {duration}s)"
