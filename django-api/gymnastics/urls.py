from django.urls import path

from gymnastics.handlers import ClassCatalogView, ClassSignupView, EventListView

urlpatterns = [
    path("classes", ClassCatalogView.as_view(), name="class-catalog"),
    path("events", EventListView.as_view(), name="event-list"),
    path("class-signup", ClassSignupView.as_view(), name="class-signup"),
]
