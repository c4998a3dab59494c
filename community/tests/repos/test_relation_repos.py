from django.test import TestCase

from community.models import Follower, Topic
from community.repos import FavouritesRepo, FollowersRepo
from community.tests.helpers import make_user


class FollowersRepoTests(TestCase):
    def setUp(self):
        self.repo = FollowersRepo()
        self.alice = make_user("alice")
        self.bob = make_user("bob")
        self.cara = make_user("cara")

    def test_add_and_is_following(self):
        self.assertFalse(self.repo.is_following(follower_id=self.alice.id, author_id=self.bob.id))
        self.repo.add(follower_id=self.alice.id, author_id=self.bob.id)
        self.assertTrue(self.repo.is_following(follower_id=self.alice.id, author_id=self.bob.id))

    def test_add_twice_keeps_single_row(self):
        self.repo.add(follower_id=self.alice.id, author_id=self.bob.id)
        self.repo.add(follower_id=self.alice.id, author_id=self.bob.id)
        self.assertEqual(Follower.objects.count(), 1)

    def test_remove(self):
        self.repo.add(follower_id=self.alice.id, author_id=self.bob.id)
        self.assertEqual(self.repo.remove(follower_id=self.alice.id, author_id=self.bob.id), 1)
        self.assertEqual(self.repo.remove(follower_id=self.alice.id, author_id=self.bob.id), 0)

    def test_following_users_ordered_by_id_desc(self):
        self.repo.add(follower_id=self.alice.id, author_id=self.bob.id)
        self.repo.add(follower_id=self.alice.id, author_id=self.cara.id)
        self.assertEqual(list(self.repo.following_users(self.alice.id)), [self.cara, self.bob])

    def test_query_filters_relations(self):
        self.repo.add(follower_id=self.alice.id, author_id=self.bob.id)
        self.repo.add(follower_id=self.bob.id, author_id=self.cara.id)
        rows = self.repo.query(follower_id=self.alice.id, order_by=("-created_at",))
        self.assertEqual([r.author_id for r in rows], [self.bob.id])


class FavouritesRepoTests(TestCase):
    def setUp(self):
        self.repo = FavouritesRepo()
        self.alice = make_user("alice")
        self.topic_a = Topic.objects.create(user=self.alice, title="a")
        self.topic_b = Topic.objects.create(user=self.alice, title="b")

    def test_add_remove_and_list(self):
        self.repo.add(user_id=self.alice.id, topic_id=self.topic_a.id)
        self.repo.add(user_id=self.alice.id, topic_id=self.topic_b.id)
        self.assertEqual(list(self.repo.topics_for(self.alice.id)), [self.topic_b, self.topic_a])
        self.repo.remove(user_id=self.alice.id, topic_id=self.topic_b.id)
        self.assertEqual(list(self.repo.topics_for(self.alice.id)), [self.topic_a])
