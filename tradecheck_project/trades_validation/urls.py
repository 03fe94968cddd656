from django.urls import include, path
from rest_framework.routers import DefaultRouter
from .views import TradeValidationViewSet

router = DefaultRouter()
router.register(r"trades", TradeValidationViewSet, basename="trade")

urlpatterns = [
    path("", include(router.urls)),
    path("validatetrades", TradeValidationViewSet.as_view({"post": "validate"}), name="validatetrades"),
]
