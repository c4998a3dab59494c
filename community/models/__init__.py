from .user import User
from .topic import Topic, Reply
from .followers import Follower
from .favourite_topic import FavouriteTopic
from .notification import Notification
from .access_token import OAuthSession, AccessToken

__all__ = [
    "User",
    "Topic",
    "Reply",
    "Follower",
    "FavouriteTopic",
    "Notification",
    "OAuthSession",
    "AccessToken",
]
