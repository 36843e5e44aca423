"""Compare stored follow counters with the user_follows table."""

from uuid import UUID

from django.core.management.base import BaseCommand, CommandError

from core.exceptions import FollowStorageError
from core.services.follow_graph_service import follow_graph_service


def _parse_user_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise CommandError(f"Invalid user ID: {value}") from e


class Command(BaseCommand):
    """Report, and optionally repair, drifting followers/following counters."""

    help = (
        "Report users whose followers/following counters differ from their "
        "follow edges. Pass --repair to rewrite the counters."
    )

    def add_arguments(self, parser):
        """Register --user-id and --repair."""
        parser.add_argument(
            "--user-id",
            action="append",
            dest="user_ids",
            default=None,
            help="Limit the audit to this user; may be given more than once",
        )
        parser.add_argument(
            "--repair",
            action="store_true",
            help="Rewrite drifting counters to the actual edge counts",
        )

    def handle(self, *_args, **options):
        """Run the audit or repair and print one line per drifting user."""
        user_ids = options["user_ids"]
        if user_ids is not None:
            user_ids = [_parse_user_id(value) for value in user_ids]

        try:
            if options["repair"]:
                drifts = follow_graph_service.repair_counts(user_ids)
                verb = "Repaired"
            else:
                drifts = follow_graph_service.audit_counts(user_ids)
                verb = "Found"
        except FollowStorageError as e:
            raise CommandError(str(e)) from e

        for drift in drifts:
            self.stdout.write(
                f"{drift.user_id}: followers {drift.stored_followers} -> "
                f"{drift.actual_followers}, following {drift.stored_following} -> "
                f"{drift.actual_following}"
            )

        summary = f"{verb} {len(drifts)} user(s) with drifting follow counters"
        if drifts:
            self.stdout.write(self.style.WARNING(summary))
        else:
            self.stdout.write(self.style.SUCCESS(summary))
