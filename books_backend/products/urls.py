# products/urls.py

"""
CATALOG URLS

Purpose:
- Register read-only catalog routes:
    /api/products/
    /api/taxes/
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from products.views import ProductViewSet, TaxViewSet

router = SimpleRouter()

router.register(r"products", ProductViewSet, basename="products")
router.register(r"taxes", TaxViewSet, basename="taxes")

urlpatterns = [
    path("", include(router.urls)),
]
