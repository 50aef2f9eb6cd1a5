"""Procedural color field.

For each color channel, three wave functions define how much influence the
channel has on the overall color of a tile. The waves use the tile's
normalized position and the virtual clock as input and are combined by a
blend strategy chosen by the visual mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

import numpy as np

from mosaic import VisualMode
from mosaic.field.grid import TileGrid
from mosaic.field.rotation import RotationOffsets
from mosaic.field.trig import cos, icos, sin

LIGHT_SCALE = 0.68
LIGHT_FLOOR = 0.32
NORMAL_FIRST_WAVE_WEIGHT = 0.6
NORMAL_WEIGHT_TOTAL = 1.6
NORMAL_DIM_DEPTH = 0.5

ValueT = TypeVar("ValueT", float, np.ndarray)


@dataclass(frozen=True)
class ChannelWaves(Generic[ValueT]):
    """Raw wave values in [0, 1] for one channel."""

    wave1: ValueT
    wave2: ValueT
    wave3: ValueT


@dataclass(frozen=True)
class TileWaves(Generic[ValueT]):
    red: ChannelWaves[ValueT]
    green: ChannelWaves[ValueT]
    blue: ChannelWaves[ValueT]

    def channels(self) -> tuple[ChannelWaves[ValueT], ...]:
        return self.red, self.green, self.blue


def compute_waves(
    clock_ms: float,
    x: ValueT,
    y: ValueT,
    offsets: RotationOffsets,
) -> TileWaves[ValueT]:
    # Lots of magic numbers control the wave functions; they are tuned by eye.
    t = clock_ms
    x_rot1 = x * offsets.rot_x1
    x_rot2 = x * offsets.rot_x2
    x_rot3 = x * offsets.rot_x3
    y_rot1 = y * offsets.rot_y1
    y_rot2 = y * offsets.rot_y2
    y_rot3 = y * offsets.rot_y3

    red = ChannelWaves(
        wave1=cos(x_rot1 + y_rot1 * offsets.rot_x3 * 2 + t / 8000),
        wave2=cos(x_rot3 + y_rot3 * offsets.rot_x3 + t / 8000),
        wave3=sin(x * 0.4 - t / 16000),
    )
    green = ChannelWaves(
        wave1=icos((x_rot1 + y_rot1) * (offsets.g1_freq_mult + 2) + t / 4000),
        wave2=icos(x_rot2 + y_rot2 * 0.8 - t / 4400),
        wave3=sin(x * 0.5 + t / 20000),
    )
    blue = ChannelWaves(
        wave1=icos(x * offsets.rot_x1 * 1.65 - t / 2000),
        wave2=icos(x * 0.8 + t / 4000),
        wave3=sin(y * 0.4 + t / 24000 + 0.75),
    )
    return TileWaves(red=red, green=green, blue=blue)


def blend_light(waves: ChannelWaves[ValueT]) -> ValueT:
    """Use only the slow second wave, lifted so tiles stay pastel."""

    return waves.wave2 * LIGHT_SCALE + LIGHT_FLOOR


def blend_normal(waves: ChannelWaves[ValueT]) -> ValueT:
    """Weighted average of the first two waves, dimmed by the third.

    The third wave is remapped to [0.5, 1] so it never fully blacks out a tile.
    """

    weighted = (waves.wave1 * NORMAL_FIRST_WAVE_WEIGHT + waves.wave2) / NORMAL_WEIGHT_TOTAL
    return weighted * (waves.wave3 * NORMAL_DIM_DEPTH + (1 - NORMAL_DIM_DEPTH))


BLEND_STRATEGIES: dict[VisualMode, Callable[[ChannelWaves], object]] = {
    VisualMode.LIGHT: blend_light,
    VisualMode.NORMAL: blend_normal,
}


def quantize(channel: ValueT) -> ValueT:
    """Map a channel in [0, 1] to an 8-bit value, clamping stray rounding."""

    return np.floor(np.clip(channel, 0.0, 1.0) * 255)


def compute_tile_color(
    clock_ms: float,
    x: float,
    y: float,
    visual_mode: VisualMode,
    offsets: RotationOffsets | None = None,
) -> tuple[int, int, int]:
    """Return the ``(r, g, b)`` color of the tile at normalized ``(x, y)``."""

    if offsets is None:
        offsets = RotationOffsets.from_clock(clock_ms)
    blend = BLEND_STRATEGIES[visual_mode]
    waves = compute_waves(clock_ms, x, y, offsets)
    red, green, blue = (int(quantize(blend(channel))) for channel in waves.channels())
    return red, green, blue


def compute_color_field(
    clock_ms: float,
    grid: TileGrid,
    visual_mode: VisualMode,
) -> np.ndarray:
    """Return colors for every tile as a ``(tile_count_x, tile_count_y, 3)`` array."""

    field = np.zeros((grid.tile_count_x, grid.tile_count_y, 3), dtype=np.uint8)
    if grid.is_empty:
        return field

    offsets = RotationOffsets.from_clock(clock_ms)
    blend = BLEND_STRATEGIES[visual_mode]
    x, y = grid.normalized_axes()
    waves = compute_waves(clock_ms, x, y, offsets)
    for index, channel in enumerate(waves.channels()):
        field[:, :, index] = quantize(blend(channel)).astype(np.uint8)
    return field
