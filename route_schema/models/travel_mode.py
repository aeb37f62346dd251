from enum import StrEnum


class Mode(StrEnum):
    driving = 'driving'
