from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from community.services import ProfileService

User = get_user_model()
profile_service = ProfileService()


def access_tokens(request, user_id):
    """List the API access tokens of the signed-in member."""
    if not request.user.is_authenticated or request.user.id != user_id:
        return redirect("users.show", user_id=user_id)
    user = get_object_or_404(User, id=user_id)
    tokens = profile_service.access_tokens_for(user)
    return render(request, "users/access_tokens.html", {"profile_user": user, "tokens": tokens})


@login_required
@require_POST
def revoke_access_token(request, user_id, token):
    if profile_service.revoke_access_token(request.user, token):
        messages.success(request, "Revoke success")
    else:
        messages.error(request, "Revoke Failed")
    return redirect("users.access_tokens", user_id=request.user.id)
