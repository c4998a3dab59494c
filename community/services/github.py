"""GitHub user API client and the cache that fronts it."""

import logging

import requests
from django.conf import settings
from django.core.cache import cache

from community.services.avatars import AvatarUpdateService
from community.services.exceptions import GithubFetchError

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "github_api_proxy_user_"


def cache_key_for(username):
    return f"{CACHE_KEY_PREFIX}{username}"


def cache_timeout_seconds():
    return settings.GITHUB_CACHE_MINUTES * 60


class GithubUserDataReader:
    """Fetch public user data from the GitHub REST API."""

    def __init__(self, base_url=None, token=None, timeout=None):
        self.base_url = (base_url or settings.GITHUB_API_URL).rstrip("/")
        self.token = token if token is not None else settings.GITHUB_API_TOKEN
        self.timeout = timeout or settings.GITHUB_API_TIMEOUT

    def _headers(self):
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def get_data_by_username(self, username):
        """Return the decoded JSON user object; raises GithubFetchError."""
        url = f"{self.base_url}/users/{username}"
        try:
            resp = requests.get(url, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("GitHub request for %s failed: %s", username, exc)
            raise GithubFetchError(username, detail=str(exc)) from exc
        if resp.status_code != 200:
            logger.warning("GitHub returned %s for %s", resp.status_code, username)
            raise GithubFetchError(username, status_code=resp.status_code)
        return resp.json()


class GithubCacheProxy:
    """
    Cache GitHub user payloads for GITHUB_CACHE_MINUTES.

    A cached payload is served as-is until it expires or `refresh_cache`
    overwrites it.
    """

    def __init__(self, reader=None, cache_backend=None, avatar_service=None):
        self.reader = reader or GithubUserDataReader()
        self.cache = cache_backend or cache
        self.avatar_service = avatar_service or AvatarUpdateService()

    def get_cached_user_data(self, username):
        return self.cache.get_or_set(
            cache_key_for(username),
            lambda: self.reader.get_data_by_username(username),
            timeout=cache_timeout_seconds(),
        )

    def refresh_cache(self, user):
        """Re-fetch user's GitHub data, overwrite the cache and re-cache the avatar."""
        user_info = self.reader.get_data_by_username(user.github_name)
        self.cache.set(cache_key_for(user.github_name), user_info, timeout=cache_timeout_seconds())

        user.image_url = user_info.get("avatar_url") or ""
        if user.image_url:
            self.avatar_service.cache_remote_avatar(user, user.image_url)
        user.save()
        logger.info("Refreshed GitHub cache for user %s (%s)", user.id, user.github_name)
        return user_info
