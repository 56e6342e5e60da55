from gymnastics.handlers.views import ClassCatalogView, ClassSignupView, EventListView

__all__ = ["ClassCatalogView", "ClassSignupView", "EventListView"]
