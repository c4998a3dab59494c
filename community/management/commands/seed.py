"""Management command to seed the database with sample members, topics and follows."""

from random import randint, sample

from django.core.management.base import BaseCommand
from django.db import transaction
from faker import Faker

from community.models import FavouriteTopic, Follower, Reply, Topic, User


class Command(BaseCommand):
    """Seed sample members with profiles, topics, replies, follows and favourites."""
    USER_COUNT = 60
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Number of members to create.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        with transaction.atomic():
            users = self.create_users(options["users"])
            topics = self.seed_topics(users, per_user=3)
            self.seed_replies(users, topics, max_per_topic=5)
            self.seed_follows(users, follow_k=5)
            self.seed_favourites(users, topics, per_user=3)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, count):
        users = []
        while len(users) < count:
            username = self.faker.unique.user_name()[:30]
            users.append(User.objects.create_user(
                username=username,
                email=f"{username}@example.org",
                password=self.DEFAULT_PASSWORD,
                real_name=self.faker.name(),
                city=self.faker.city(),
                company=self.faker.company(),
                github_name=username,
                introduction=self.faker.sentence(nb_words=12),
            ))
        return users

    def seed_topics(self, users, per_user):
        topics = []
        for user in users:
            for _ in range(randint(0, per_user)):
                topics.append(Topic.objects.create(
                    user=user,
                    title=self.faker.sentence(nb_words=6).rstrip('.'),
                    body=self.faker.paragraph(nb_sentences=4),
                ))
        return topics

    def seed_replies(self, users, topics, max_per_topic):
        for topic in topics:
            for author in sample(users, min(len(users), randint(0, max_per_topic))):
                Reply.objects.create(topic=topic, user=author, body=self.faker.paragraph(nb_sentences=2))

    def seed_follows(self, users, follow_k):
        for user in users:
            candidates = [u for u in users if u != user]
            for author in sample(candidates, min(len(candidates), follow_k)):
                Follower.objects.get_or_create(follower=user, author=author)

    def seed_favourites(self, users, topics, per_user):
        if not topics:
            return
        for user in users:
            for topic in sample(topics, min(len(topics), per_user)):
                FavouriteTopic.objects.get_or_create(user=user, topic=topic)
