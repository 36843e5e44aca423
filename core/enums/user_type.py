"""User type enumeration for account profiles."""

from enum import Enum


class UserType(str, Enum):
    """User type enumeration matching the users.user_type column."""

    ATHLETE = "athlete"
    COACH = "coach"
    ORGANIZATION = "organization"
    PARENT = "parent"
