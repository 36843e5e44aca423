"""Initial schema: reference the external users table and own user_follows."""

import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "user_id",
                    models.UUIDField(
                        db_column="id",
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "user_type",
                    models.CharField(
                        choices=[
                            ("athlete", "athlete"),
                            ("coach", "coach"),
                            ("organization", "organization"),
                            ("parent", "parent"),
                        ],
                        default="athlete",
                        max_length=20,
                        null=True,
                    ),
                ),
                (
                    "username",
                    models.CharField(blank=True, max_length=50, null=True, unique=True),
                ),
                (
                    "email",
                    models.EmailField(blank=True, max_length=255, null=True, unique=True),
                ),
                ("full_name", models.CharField(blank=True, default="", max_length=255)),
                ("profile_url", models.CharField(blank=True, max_length=500, null=True)),
                ("followers", models.PositiveIntegerField(default=0)),
                ("following", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "users",
                "ordering": ["-created_at"],
                "managed": False,
            },
        ),
        migrations.CreateModel(
            name="UserFollow",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("follower_username", models.CharField(max_length=255)),
                (
                    "followee_username",
                    models.CharField(db_column="following_username", max_length=255),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        db_index=True, default=django.utils.timezone.now
                    ),
                ),
                (
                    "followee",
                    models.ForeignKey(
                        db_column="following_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="incoming_follows",
                        to="core.user",
                    ),
                ),
                (
                    "follower",
                    models.ForeignKey(
                        db_column="follower_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="outgoing_follows",
                        to="core.user",
                    ),
                ),
            ],
            options={
                "db_table": "user_follows",
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("follower", "followee"), name="unique_user_follow"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            ("follower", models.F("followee")), _negated=True
                        ),
                        name="prevent_self_follow",
                    ),
                ],
            },
        ),
    ]
