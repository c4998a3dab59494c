"""GitHub card proxy and cache refresh."""

import logging

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from community.policies import authorize_update
from community.services import GithubCacheProxy
from community.services.exceptions import GithubFetchError

logger = logging.getLogger(__name__)
User = get_user_model()
github_proxy = GithubCacheProxy()


@api_view(["GET"])
@permission_classes([AllowAny])
def github_api_proxy(request, username):
    """Return the cached GitHub user payload for username."""
    try:
        data = github_proxy.get_cached_user_data(username)
    except GithubFetchError as exc:
        return Response(
            {"error": "GitHub user data unavailable", "status": exc.status_code},
            status=status.HTTP_502_BAD_GATEWAY,
        )
    return Response(data)


def github_card(request):
    return render(request, "users/github_card.html")


@login_required
@require_POST
def refresh_cache(request, user_id):
    """Re-fetch the member's GitHub data and avatar, bypassing the cache."""
    user = get_object_or_404(User, id=user_id)
    authorize_update(request.user, user)

    if not user.github_name:
        messages.error(request, "Refresh cache failed: no GitHub name on this profile.")
        return redirect("users.edit", user_id=user.id)

    try:
        github_proxy.refresh_cache(user)
    except GithubFetchError as exc:
        logger.warning("Cache refresh failed for user %s: %s", user.id, exc)
        messages.error(request, "Refresh cache failed.")
        return redirect("users.edit", user_id=user.id)

    messages.info(request, "Refresh cache success")
    return redirect("users.edit", user_id=user.id)
