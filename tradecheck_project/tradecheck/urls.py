from django.urls import include, path

urlpatterns = [
    path("", include("trades_validation.urls")),
]
