"""Line information attached to a departure."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineInfo:
    """Display information of the line (or route) serving a departure.

    Colors are hex strings without the leading '#', as delivered by the provider.
    """

    id: str | None
    name: str | None
    code: str | None
    color: str | None = None
    text_color: str | None = None

    @property
    def label(self) -> str | None:
        """Text shown in the line badge."""
        return self.name or self.code
