"""Relationship of a network search hit to the searching user."""

from enum import Enum


class NetworkRelationship(str, Enum):
    """How a user found by network search is connected to the searcher."""

    FOLLOWING = "following"
    FOLLOWER = "follower"
