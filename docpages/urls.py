from django.urls import path

from .views import MarkdownPageView

urlpatterns = [
    path("", MarkdownPageView.as_view(), name="docpage-index"),
    path("<path:path>", MarkdownPageView.as_view(), name="docpage"),
]
