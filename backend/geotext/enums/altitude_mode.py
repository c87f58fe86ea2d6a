from enum import StrEnum


class AltitudeMode(StrEnum):
    ABSOLUTE = 'absolute'
    CLAMP_TO_GROUND = 'clampToGround'
    RELATIVE_TO_GROUND = 'relativeToGround'
