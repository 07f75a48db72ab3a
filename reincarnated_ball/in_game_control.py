"""Aiming and throwing: the player controller's rotation and the throw impulse."""

from __future__ import annotations

import math
from typing import NamedTuple

from .level import PlayerDirection
from .vector import Transform, Vec2
from .world import GamepadButton

MAX_SIDE_ANGLE = 0.2

ROTATION_SPEED = 0.1
ROTATION_ACCEL_TIME = 2.0
ROTATION_MAX_MULTIPLIER = 4.0

MIN_POWER = 80.0
MAX_POWER = 190.0
MAX_POWER_TIME = 1.0

BALL_OFFSET_MIN_IMPULSE = 3.0
BALL_OFFSET_MAX_IMPULSE = 15.0
PLAYER_CENTER_OFFSET = Vec2(16.0, 16.0)
BALL_CENTER_OFFSET = Vec2(-8.0, -8.0)

FORWARD_ANGLE_RANGE = 3.1416


class RotationControls(NamedTuple):
    """Buttons that turn the controller and the limits of its aim."""

    left_button: GamepadButton
    right_button: GamepadButton
    minimum: float
    maximum: float


def _lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def _ratio(value: float, min1: float, max1: float) -> float:
    return min(max((value - min1) / (max1 - min1), 0.0), 1.0)


def remap(value: float, min1: float, max1: float, min2: float, max2: float) -> float:
    """Map ``value`` from [min1, max1] onto [min2, max2], clamping to the range."""
    return min2 + (max2 - min2) * _ratio(value, min1, max1)


def remap_rotation(value: float, min1: float, max1: float, min2: float, max2: float) -> float:
    """Like :func:`remap` but measured from zero: the result spans 0 to max2 - min2."""
    return (max2 - min2) * _ratio(value, min1, max1)


def impulse_ratio(elapsed: float, press_start: float | None) -> float:
    """How charged the throw is, from 0 to 1; 0 when the button is not held."""
    if press_start is None:
        return 0.0
    return remap(elapsed - press_start, 0.0, MAX_POWER_TIME, 0.0, 1.0)


def impulse_force(elapsed: float, press_start: float | None) -> float:
    """Strength of the throw for a button held since ``press_start``."""
    return _lerp(MIN_POWER, MAX_POWER, impulse_ratio(elapsed, press_start))


def controller_forward(rotation: float) -> Vec2:
    """Unit vector the controller aims along for a given rotation."""
    angle = remap_rotation(rotation, -0.5, 0.5, FORWARD_ANGLE_RANGE, -FORWARD_ANGLE_RANGE)
    return Vec2(-math.sin(angle), math.cos(angle))


def ball_position_on_controller(controller: Transform | None, impulse_ratio: float) -> Vec2:
    """Where the held ball sits in front of the controller; pulled back as it charges."""
    if controller is None:
        return Vec2()
    offset = _lerp(BALL_OFFSET_MIN_IMPULSE, BALL_OFFSET_MAX_IMPULSE, 1.0 - impulse_ratio)
    center = controller.translation + PLAYER_CENTER_OFFSET
    return center + BALL_CENTER_OFFSET + controller_forward(controller.rotation) * offset


def rotation_controls(direction: PlayerDirection) -> RotationControls:
    if direction is PlayerDirection.BOTTOM:
        return RotationControls(
            GamepadButton.DPAD_LEFT, GamepadButton.DPAD_RIGHT, -MAX_SIDE_ANGLE, MAX_SIDE_ANGLE
        )
    if direction is PlayerDirection.TOP:
        return RotationControls(
            GamepadButton.DPAD_RIGHT,
            GamepadButton.DPAD_LEFT,
            -(0.5 - MAX_SIDE_ANGLE),
            0.5 - MAX_SIDE_ANGLE,
        )
    if direction is PlayerDirection.LEFT:
        return RotationControls(
            GamepadButton.DPAD_UP,
            GamepadButton.DPAD_DOWN,
            -0.25 - MAX_SIDE_ANGLE,
            -0.25 + MAX_SIDE_ANGLE,
        )
    return RotationControls(
        GamepadButton.DPAD_DOWN,
        GamepadButton.DPAD_UP,
        0.25 - MAX_SIDE_ANGLE,
        0.25 + MAX_SIDE_ANGLE,
    )


def rotate_controller(
    rotation: float, direction: PlayerDirection, change: float, clockwise: bool
) -> float:
    """New controller rotation after turning by ``change``.

    ``clockwise`` False is the left button (the rotation grows), True the right
    button (it shrinks). From the top the aim wraps around at +-0.5 and skips the
    band between the limits; from the other sides it is clamped to the limits.
    """
    controls = rotation_controls(direction)
    lo, hi = controls.minimum, controls.maximum

    if direction is PlayerDirection.TOP:
        if not clockwise:
            new_rotation = rotation + change
            if new_rotation > 0.5:
                new_rotation = -0.5 + (new_rotation - 0.5)
            if lo < new_rotation < hi:
                new_rotation = lo
        else:
            new_rotation = rotation - change
            if new_rotation < -0.5:
                new_rotation = 0.5 - (abs(new_rotation) - 0.5)
            if lo < new_rotation < hi:
                new_rotation = hi
        return new_rotation

    new_rotation = rotation - change if clockwise else rotation + change
    return min(max(new_rotation, lo), hi)