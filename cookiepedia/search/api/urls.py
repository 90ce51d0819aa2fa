from django.urls import path

from .views import CategoriesView
from .views import PopularSearchesView
from .views import SuggestionsView

app_name = "search"
urlpatterns = [
    path("suggestions/", SuggestionsView.as_view(), name="suggestions"),
    path("popular/", PopularSearchesView.as_view(), name="popular"),
    path("categories/", CategoriesView.as_view(), name="categories"),
]
