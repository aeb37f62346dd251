from enum import StrEnum


class DrivingSide(StrEnum):
    """
    Turn direction, as used by maneuver modifiers and lane indications.
    """

    left = 'left'
    right = 'right'
    straight = 'straight'
    slight_left = 'slight left'
    slight_right = 'slight right'
    sharp_left = 'sharp left'
    sharp_right = 'sharp right'
    none = 'none'
    uturn = 'uturn'
