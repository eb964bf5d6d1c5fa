"""Chaperone (play-area boundary) offsetting.

Bounds are a sequence of quads; each quad holds 4 corner vectors in the
standing tracking universe (meters, y up). Corners whose y is exactly 0 lie
on the floor baseline, which the runtime resets on its own regardless of
calibration. Offsetting them vertically makes the floor drift, so they are
pinned: only x and z move.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

import numpy as np

from ..math3d import transform, vector

logger = logging.getLogger(__name__)

Quad = Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]


def as_quad(corners) -> Quad:
    if len(corners) != 4:
        raise ValueError(f"Expected 4 quad corners, got {len(corners)}")
    return tuple(vector.as_vec3(c) for c in corners)  # type: ignore[return-value]


def offset_corner(corner, offset) -> np.ndarray:
    c = vector.as_vec3(corner)
    o = vector.as_vec3(offset)
    x, y, z = c
    # Exact comparison: the floor marker is a literal 0, not "close to 0".
    if y != 0.0:
        y += o[1]
    return np.array([x + o[0], y, z + o[2]], dtype=np.float64)


def offset_quad(quad, offset) -> Quad:
    return tuple(offset_corner(c, offset) for c in as_quad(quad))  # type: ignore[return-value]


def offset_bounds(quads: Sequence, offset) -> tuple[Quad, ...]:
    """Return new bounds with offset applied to every corner; inputs are untouched."""
    out = tuple(offset_quad(q, offset) for q in quads)
    logger.debug("[CHAPERONE] offset %d quads by %s", len(out), np.asarray(offset).tolist())
    return out


def quad_centroid(quad) -> np.ndarray:
    return np.mean(np.stack(as_quad(quad)), axis=0)


def offset_standing_pose(m, offset, local_axis: bool = False) -> np.ndarray:
    """Move the standing zero pose by the same offset as the bounds."""
    return transform.translate(m, offset, local_axis=local_axis)


def box_bounds(width: float, depth: float, height: float) -> tuple[Quad, ...]:
    """Four wall quads of a width x depth room centred on the origin.

    Each wall has two floor corners (y == 0) and two top corners (y == height).
    """
    hx = width / 2.0
    hz = depth / 2.0
    ground = [(-hx, -hz), (hx, -hz), (hx, hz), (-hx, hz)]
    quads = []
    for i, (x0, z0) in enumerate(ground):
        x1, z1 = ground[(i + 1) % 4]
        quads.append(
            as_quad(
                [
                    (x0, 0.0, z0),
                    (x1, 0.0, z1),
                    (x1, height, z1),
                    (x0, height, z0),
                ]
            )
        )
    return tuple(quads)
