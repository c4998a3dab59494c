from .user_repo import UserRepo
from .followers_repo import FollowersRepo
from .favourites_repo import FavouritesRepo
from .topic_repo import TopicRepo, ReplyRepo

__all__ = ["UserRepo", "FollowersRepo", "FavouritesRepo", "TopicRepo", "ReplyRepo"]
