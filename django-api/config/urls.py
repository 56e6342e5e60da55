from django.urls import include, path

urlpatterns = [
    path("", include("gymnastics.urls")),
]
