from __future__ import annotations

import math
from dataclasses import dataclass

ROTATION_PERIOD_MS = 120_000
G1_FREQUENCY_PERIOD_MS = 24_000
SECOND_ANGLE_OFFSET = 0.5
THIRD_ANGLE_OFFSET = math.pi / 2


@dataclass(frozen=True)
class RotationOffsets:
    """Grid-wide rotation shared by every tile drawn in one frame.

    The whole field rotates slowly, once every two minutes. ``g1_freq_mult``
    oscillates faster and modulates the frequency of the first green wave.
    """

    rot_x1: float
    rot_x2: float
    rot_x3: float
    rot_y1: float
    rot_y2: float
    rot_y3: float
    g1_freq_mult: float

    @classmethod
    def from_clock(cls, clock_ms: float) -> RotationOffsets:
        angle1 = clock_ms / ROTATION_PERIOD_MS * math.tau
        angle2 = angle1 + SECOND_ANGLE_OFFSET
        angle3 = angle1 + THIRD_ANGLE_OFFSET
        return cls(
            rot_x1=math.sin(angle1),
            rot_x2=math.sin(angle2),
            rot_x3=math.sin(angle3),
            rot_y1=math.cos(angle1),
            rot_y2=math.cos(angle2),
            rot_y3=math.cos(angle3),
            g1_freq_mult=math.sin(clock_ms / G1_FREQUENCY_PERIOD_MS * math.tau),
        )
