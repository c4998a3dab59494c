from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.views.decorators.http import require_POST

from community.services import FollowService
from community.views.view_utils import is_ajax_request

User = get_user_model()
follow_service_factory = FollowService


@login_required
@require_POST
def do_follow(request, user_id):
    """Follow/unfollow another member, ignoring self-follow attempts."""
    target = get_object_or_404(User, id=user_id)
    result = follow_service_factory(request.user).toggle_follow(target)

    if is_ajax_request(request):
        return JsonResponse(result)

    if result["status"] != "noop":
        messages.success(request, "Operation succeeded.")
    return redirect("users.show", user_id=target.id)
