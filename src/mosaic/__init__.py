from enum import StrEnum


class VisualMode(StrEnum):
    NORMAL = "normal"
    LIGHT = "light"

    def toggled(self) -> "VisualMode":
        if self is VisualMode.LIGHT:
            return VisualMode.NORMAL
        return VisualMode.LIGHT
