"""Enum definitions for transport service models."""

import enum


def enum_values(enum_cls):
    """Return persistent DB values for SAEnum mappings."""
    return [member.value for member in enum_cls]


class Status(str, enum.Enum):
    """Transport lifecycle status. The value is the display label."""

    PENDING = "Pending"
    IN_TRANSIT = "In Transit"
    IN_STORAGE = "In Storage"
    FINISHED = "Finished"

    @property
    def label(self) -> str:
        return self.value


class UserRole(str, enum.Enum):
    ADMIN = "Admin"
    MECHANIC = "Mechanic"
    LOGISTIC = "Logistic"
