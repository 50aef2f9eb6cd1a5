"""Trig helpers working on normalized phases.

Instead of accepting radians and returning a value between -1 and 1, these
accept a phase where 1.0 is one full cycle and return a value between 0 and 1.
Both plain floats and numpy arrays are accepted.
"""

from __future__ import annotations

from typing import TypeVar

import numpy as np

TAU = np.pi * 2

PhaseT = TypeVar("PhaseT", float, np.ndarray)


def sin(phase: PhaseT) -> PhaseT:
    return (np.sin(phase * TAU) + 1) / 2


def isin(phase: PhaseT) -> PhaseT:
    return (-np.sin(phase * TAU) + 1) / 2


def cos(phase: PhaseT) -> PhaseT:
    return (np.cos(phase * TAU) + 1) / 2


def icos(phase: PhaseT) -> PhaseT:
    return (-np.cos(phase * TAU) + 1) / 2
