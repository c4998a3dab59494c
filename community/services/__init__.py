from .avatars import AvatarUpdateService, classify_extension
from .follow import FollowService
from .github import GithubCacheProxy, GithubUserDataReader
from .notifications import Notifier
from .users import ProfileService

__all__ = [
    "AvatarUpdateService",
    "classify_extension",
    "FollowService",
    "GithubCacheProxy",
    "GithubUserDataReader",
    "Notifier",
    "ProfileService",
]
