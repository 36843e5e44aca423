"""Factories for users and follow edges."""

from datetime import datetime

import factory
from django.utils import timezone
from factory.django import DjangoModelFactory
from faker import Faker

from core.enums import UserType
from core.models import User, UserFollow

fake = Faker()


class UserFactory(DjangoModelFactory):
    """Factory for User rows with zeroed counters."""

    class Meta:
        model = User

    username = factory.LazyAttribute(lambda _: fake.unique.user_name()[:50])
    email = factory.LazyAttribute(lambda _: fake.unique.email())
    full_name = factory.LazyAttribute(lambda _: fake.name())
    user_type = factory.Iterator([user_type.value for user_type in UserType])
    profile_url = factory.LazyAttribute(lambda _: fake.image_url())
    followers = 0
    following = 0


class UserFollowFactory(DjangoModelFactory):
    """Factory for follow edges.

    Inserts the edge row only; neither user's counters are touched.
    """

    class Meta:
        model = UserFollow

    follower = factory.SubFactory(UserFactory)
    followee = factory.SubFactory(UserFactory)
    follower_username = factory.LazyAttribute(lambda o: o.follower.display_name)
    followee_username = factory.LazyAttribute(lambda o: o.followee.display_name)
    created_at = factory.LazyFunction(timezone.now)


def create_user(**overrides) -> User:
    """Create and save a User with realistic random profile data."""
    return UserFactory(**overrides)


def create_follow_edge(
    follower: User, followee: User, created_at: datetime | None = None
) -> UserFollow:
    """Insert a follow edge directly, leaving both counters untouched.

    Useful for building drifted state; go through the follow graph service
    when counters must stay consistent.
    """
    if created_at is None:
        return UserFollowFactory(follower=follower, followee=followee)
    return UserFollowFactory(follower=follower, followee=followee, created_at=created_at)
