"""Avatar edit page and upload handler."""

import logging

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_http_methods

from community.policies import authorize_update
from community.services import AvatarUpdateService
from community.services.exceptions import AvatarUpdateError
from community.views.view_utils import is_ajax_request

logger = logging.getLogger(__name__)
User = get_user_model()
avatar_service = AvatarUpdateService()


@login_required
@require_http_methods(["GET", "POST"])
def user_avatar(request, user_id):
    """GET renders the avatar form, POST stores a new avatar."""
    if request.method == "POST":
        return update_avatar(request, user_id)
    return edit_avatar(request, user_id)


def edit_avatar(request, user_id):
    user = get_object_or_404(User, id=user_id)
    authorize_update(request.user, user)
    return render(request, "users/edit_avatar.html", {"profile_user": user})


def update_avatar(request, user_id):
    """Store the uploaded avatar, then flash the outcome and go back to the form."""
    try:
        avatar_service.update_avatar(user_id, request.user, request.FILES.get("avatar"))
    except User.DoesNotExist:
        raise Http404("User not found.")
    except AvatarUpdateError as exc:
        logger.info("Avatar update rejected for user %s: %s", user_id, exc.message)
        if is_ajax_request(request):
            return JsonResponse({"error": exc.message}, status=400)
        messages.error(request, exc.message)
        return redirect("users.edit_avatar", user_id=user_id)
    except OSError:
        logger.exception("Avatar storage failed for user %s", user_id)
        raise

    messages.success(request, "Update Avatar Success")
    return redirect("users.edit_avatar", user_id=user_id)
