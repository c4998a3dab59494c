from django.urls import path

from community import views

urlpatterns = [
    path('users/', views.user_index, name='users.index'),
    path('users/regenerate_login_token/', views.regenerate_login_token, name='users.regenerate_login_token'),
    path('users/<int:user_id>/', views.user_show, name='users.show'),
    path('users/<int:user_id>/edit/', views.user_edit, name='users.edit'),
    path('users/<int:user_id>/topics/', views.user_topics, name='users.topics'),
    path('users/<int:user_id>/replies/', views.user_replies, name='users.replies'),
    path('users/<int:user_id>/favorites/', views.user_favorites, name='users.favorites'),
    path('users/<int:user_id>/following/', views.user_following, name='users.following'),
    path('users/<int:user_id>/access_tokens/', views.access_tokens, name='users.access_tokens'),
    path(
        'users/<int:user_id>/access_tokens/<str:token>/revoke/',
        views.revoke_access_token,
        name='users.revoke_access_token',
    ),
    path('users/<int:user_id>/blocking/', views.toggle_blocking, name='users.blocking'),
    path('users/<int:user_id>/avatar/', views.user_avatar, name='users.edit_avatar'),
    path('users/<int:user_id>/follow/', views.do_follow, name='users.follow'),
    path('users/<int:user_id>/refresh_cache/', views.refresh_cache, name='users.refresh_cache'),
    path('github-api-proxy/users/<str:username>', views.github_api_proxy, name='users.github_api_proxy'),
    path('github-card/', views.github_card, name='users.github_card'),
]
