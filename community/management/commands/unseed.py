from django.core.management.base import BaseCommand
from community.models import User


class Command(BaseCommand):
    """
    Remove (unseed) member data from the database.

    Deletes every non-staff user; topics, replies, follows, favourites and
    notifications go with them through cascading foreign keys.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        deleted_count, _ = User.objects.filter(is_staff=False).delete()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} rows for non-staff users."))
