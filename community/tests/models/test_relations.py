from django.db import IntegrityError, transaction
from django.test import TestCase

from community.models import FavouriteTopic, Follower, Reply, Topic
from community.tests.helpers import make_user


class FollowerModelTests(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.bob = make_user("bob")

    def test_follow_pair_is_unique(self):
        Follower.objects.create(follower=self.alice, author=self.bob)
        with self.assertRaises(IntegrityError), transaction.atomic():
            Follower.objects.create(follower=self.alice, author=self.bob)

    def test_cannot_follow_self(self):
        with self.assertRaises(IntegrityError), transaction.atomic():
            Follower.objects.create(follower=self.alice, author=self.alice)

    def test_related_names(self):
        Follower.objects.create(follower=self.alice, author=self.bob)
        self.assertEqual(self.alice.following.count(), 1)
        self.assertEqual(self.bob.followers.count(), 1)


class TopicQuerySetTests(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.bob = make_user("bob")

    def test_whose_and_recent(self):
        first = Topic.objects.create(user=self.alice, title="first")
        second = Topic.objects.create(user=self.alice, title="second")
        Topic.objects.create(user=self.bob, title="other")
        self.assertEqual(list(Topic.objects.whose(self.alice).recent()), [second, first])

    def test_reply_helpers(self):
        topic = Topic.objects.create(user=self.bob, title="t")
        reply = Reply.objects.create(topic=topic, user=self.alice, body="hi")
        self.assertEqual(list(Reply.objects.whose(self.alice).recent()), [reply])

    def test_favourite_topic_is_unique(self):
        topic = Topic.objects.create(user=self.bob, title="t")
        FavouriteTopic.objects.create(user=self.alice, topic=topic)
        with self.assertRaises(IntegrityError), transaction.atomic():
            FavouriteTopic.objects.create(user=self.alice, topic=topic)
