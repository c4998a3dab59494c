"""Profile pages: listing, viewing, editing and moderation."""

import logging

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from community.forms import UserProfileForm
from community.policies import authorize_update
from community.repos import FavouritesRepo, FollowersRepo, ReplyRepo, TopicRepo, UserRepo
from community.services import FollowService, ProfileService
from community.views.view_utils import paginate

logger = logging.getLogger(__name__)
User = get_user_model()

SHOW_RECENT_LIMIT = 10

user_repo = UserRepo()
topic_repo = TopicRepo()
reply_repo = ReplyRepo()
followers_repo = FollowersRepo()
favourites_repo = FavouritesRepo()
profile_service = ProfileService()
follow_service_factory = FollowService


def user_index(request):
    """Show the most recently registered members."""
    return render(request, "users/index.html", {"users": user_repo.recent()})


def user_show(request, user_id):
    """Profile page with the member's latest topics and replies."""
    user = get_object_or_404(User, id=user_id)
    context = {
        "profile_user": user,
        "topics": topic_repo.recent_for(user)[:SHOW_RECENT_LIMIT],
        "replies": reply_repo.recent_for(user)[:SHOW_RECENT_LIMIT],
        "is_following": follow_service_factory(request.user).is_following(user),
    }
    return render(request, "users/show.html", context)


@login_required
def user_edit(request, user_id):
    """Render the profile form (GET) or apply it (POST)."""
    user = get_object_or_404(User, id=user_id)
    authorize_update(request.user, user)

    form = UserProfileForm(request.POST or None, instance=user)
    if request.method == "POST":
        if form.is_valid():
            profile_service.update_profile(request.user, user, form.cleaned_data)
            messages.success(request, "Operation succeeded.")
            return redirect("users.edit", user_id=user.id)
        messages.error(request, "Please correct the errors below.")

    return render(request, "users/edit.html", {"profile_user": user, "form": form})


def user_topics(request, user_id):
    user = get_object_or_404(User, id=user_id)
    page = paginate(request, topic_repo.recent_for(user))
    return render(request, "users/topics.html", {"profile_user": user, "topics": page})


def user_replies(request, user_id):
    user = get_object_or_404(User, id=user_id)
    page = paginate(request, reply_repo.recent_for(user))
    return render(request, "users/replies.html", {"profile_user": user, "replies": page})


def user_favorites(request, user_id):
    user = get_object_or_404(User, id=user_id)
    page = paginate(request, favourites_repo.topics_for(user.id))
    return render(request, "users/favorites.html", {"profile_user": user, "topics": page})


def user_following(request, user_id):
    user = get_object_or_404(User, id=user_id)
    page = paginate(request, followers_repo.following_users(user.id))
    return render(request, "users/following.html", {"profile_user": user, "following_users": page})


@login_required
@require_POST
def toggle_blocking(request, user_id):
    """Ban or unban a member (staff only)."""
    user = get_object_or_404(User, id=user_id)
    profile_service.toggle_ban(request.user, user)
    return redirect("users.show", user_id=user.id)


@login_required
@require_POST
def regenerate_login_token(request):
    if profile_service.regenerate_login_token(request.user):
        messages.success(request, "Regenerate succeeded.")
    else:
        messages.error(request, "Regenerate failed.")
    return redirect("users.show", user_id=request.user.id)
