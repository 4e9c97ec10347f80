from django.urls import path

from apps.accounts.views.user_views import CurrentUserView

app_name = "accounts"

urlpatterns = [
    path("me/", CurrentUserView.as_view(), name="current-user"),
]
