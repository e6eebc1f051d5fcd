from django.conf import settings
from django.contrib.staticfiles.views import serve
from django.urls import path, re_path, include

urlpatterns = [
    re_path(r"^static/(?P<path>.*)$", serve, {"insecure": True}),
]

if settings.BOARD_VARIANT == "todo":
    urlpatterns += [
        path("", include("todo.urls")),
    ]
else:
    urlpatterns += [
        path("", include("place.urls")),
        path("", include("api.urls")),
    ]
