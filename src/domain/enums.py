"""Domain enumerations."""

import enum


class HospitalType(str, enum.Enum):
    """Known hospital categories.

    The ``type`` column is an open set; these are the labels the sample
    data and the UI filters use.
    """

    GENERAL = "general"
    SPECIALTY = "specialty"
    EMERGENCY = "emergency"
    CLINIC = "clinic"


WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
