from .user_views import *
from .avatar_views import *
from .follow_views import *
from .token_views import *
from .github_views import *
