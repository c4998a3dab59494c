from unittest.mock import patch

from django.contrib.auth.models import AnonymousUser
from django.urls import reverse

from community.models import FavouriteTopic, Follower, Reply, Topic
from community.tests.helpers import make_user
from community.tests.views.base import ProfileViewTestCase, add_session_and_messages, flashed
from community.views import user_views


class UserIndexViewTests(ProfileViewTestCase):
    def test_lists_newest_members_first(self):
        response = self.client.get(reverse("users.index"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(list(response.context["users"]), [self.other, self.user])


class UserShowViewTests(ProfileViewTestCase):
    def setUp(self):
        super().setUp()
        self.url = reverse("users.show", kwargs={"user_id": self.user.id})

    def test_shows_recent_topics_and_replies(self):
        topics = [Topic.objects.create(user=self.user, title=f"Topic {i}") for i in range(12)]
        Reply.objects.create(topic=topics[0], user=self.user, body="first!")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["profile_user"], self.user)
        self.assertEqual(len(response.context["topics"]), 10)
        self.assertEqual(response.context["topics"][0], topics[-1])
        self.assertEqual(len(response.context["replies"]), 1)
        self.assertFalse(response.context["is_following"])

    def test_is_following_reflects_viewer(self):
        Follower.objects.create(follower=self.other, author=self.user)
        self.client.force_login(self.other)
        response = self.client.get(self.url)
        self.assertTrue(response.context["is_following"])
        self.assertContains(response, "Unfollow")

    def test_unknown_member_is_404(self):
        self.assertEqual(self.client.get(reverse("users.show", kwargs={"user_id": 999})).status_code, 404)


class UserEditViewTests(ProfileViewTestCase):
    def setUp(self):
        super().setUp()
        self.url = reverse("users.edit", kwargs={"user_id": self.user.id})

    def test_owner_sees_form(self):
        self.client.force_login(self.user)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "users/edit.html")

    def test_post_updates_profile(self):
        self.client.force_login(self.user)
        response = self.client.post(self.url, {"city": "Leeds", "company": "Acme", "github_name": "johnd"})

        self.assertRedirects(response, self.url, fetch_redirect_response=False)
        self.assertIn(("success", "Operation succeeded."), flashed(response))
        self.user.refresh_from_db()
        self.assertEqual(self.user.city, "Leeds")
        self.assertEqual(self.user.github_name, "johnd")

    def test_other_member_is_forbidden(self):
        self.client.force_login(self.other)
        self.assertEqual(self.client.get(self.url).status_code, 403)
        self.assertEqual(self.client.post(self.url, {"city": "Paris"}).status_code, 403)
        self.user.refresh_from_db()
        self.assertEqual(self.user.city, "")

    def test_anonymous_is_redirected(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 302)


class UserListingViewTests(ProfileViewTestCase):
    def test_topics_are_paginated(self):
        for i in range(20):
            Topic.objects.create(user=self.user, title=f"Topic {i}")
        url = reverse("users.topics", kwargs={"user_id": self.user.id})

        first = self.client.get(url)
        second = self.client.get(url, {"page": 2})
        clamped = self.client.get(url, {"page": 99})

        self.assertEqual(len(first.context["topics"]), 15)
        self.assertEqual(len(second.context["topics"]), 5)
        self.assertEqual(clamped.context["topics"].number, 2)

    def test_replies_lists_only_members_replies(self):
        topic = Topic.objects.create(user=self.other, title="Hello")
        mine = Reply.objects.create(topic=topic, user=self.user, body="mine")
        Reply.objects.create(topic=topic, user=self.other, body="theirs")
        response = self.client.get(reverse("users.replies", kwargs={"user_id": self.user.id}))
        self.assertEqual(list(response.context["replies"]), [mine])

    def test_favorites_lists_favourited_topics(self):
        topic = Topic.objects.create(user=self.other, title="Saved")
        FavouriteTopic.objects.create(user=self.user, topic=topic)
        response = self.client.get(reverse("users.favorites", kwargs={"user_id": self.user.id}))
        self.assertEqual(list(response.context["topics"]), [topic])
        self.assertContains(response, "Saved")

    def test_following_lists_followed_members(self):
        third = make_user("third")
        Follower.objects.create(follower=self.user, author=self.other)
        Follower.objects.create(follower=self.user, author=third)
        response = self.client.get(reverse("users.following", kwargs={"user_id": self.user.id}))
        self.assertEqual(list(response.context["following_users"]), [third, self.other])


class ModerationViewTests(ProfileViewTestCase):
    def setUp(self):
        super().setUp()
        self.staff = make_user("moderator", is_staff=True)
        self.url = reverse("users.blocking", kwargs={"user_id": self.user.id})

    def test_staff_toggles_ban(self):
        self.client.force_login(self.staff)
        response = self.client.post(self.url)
        self.assertRedirects(
            response,
            reverse("users.show", kwargs={"user_id": self.user.id}),
            fetch_redirect_response=False,
        )
        self.user.refresh_from_db()
        self.assertTrue(self.user.is_banned)

        self.client.post(self.url)
        self.user.refresh_from_db()
        self.assertFalse(self.user.is_banned)

    def test_member_cannot_ban(self):
        self.client.force_login(self.other)
        self.assertEqual(self.client.post(self.url).status_code, 403)
        self.user.refresh_from_db()
        self.assertFalse(self.user.is_banned)

    def test_get_is_not_allowed(self):
        self.client.force_login(self.staff)
        self.assertEqual(self.client.get(self.url).status_code, 405)


class RegenerateLoginTokenViewTests(ProfileViewTestCase):
    def test_regenerates_and_flashes(self):
        self.client.force_login(self.user)
        response = self.client.post(reverse("users.regenerate_login_token"))

        self.assertRedirects(
            response,
            reverse("users.show", kwargs={"user_id": self.user.id}),
            fetch_redirect_response=False,
        )
        self.assertIn(("success", "Regenerate succeeded."), flashed(response))
        self.user.refresh_from_db()
        self.assertTrue(20 <= len(self.user.login_token) <= 32)

    def test_failure_flashes_error(self):
        request = add_session_and_messages(self.factory.post("/users/regenerate_login_token/"))
        request.user = self.user
        with patch.object(user_views.profile_service, "regenerate_login_token", return_value=None):
            response = user_views.regenerate_login_token(request)

        self.assertEqual(response.status_code, 302)
        self.assertEqual([str(m) for m in request._messages], ["Regenerate failed."])

    def test_anonymous_is_redirected_to_login(self):
        request = self.factory.post("/users/regenerate_login_token/")
        request.user = AnonymousUser()
        response = user_views.regenerate_login_token(request)
        self.assertEqual(response.status_code, 302)
        self.assertIn("/admin/login/", response["Location"])
