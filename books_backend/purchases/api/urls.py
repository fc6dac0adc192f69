# purchases/api/urls.py

from django.urls import path

from purchases.api.views import (
    PurchaseOrderCancelView,
    PurchaseOrderConfirmView,
    PurchaseOrderDetailView,
    PurchaseOrderListCreateView,
    VendorBillDetailView,
    VendorBillListCreateView,
    VendorPaymentListCreateView,
)

urlpatterns = [
    path(
        "purchase-orders/",
        PurchaseOrderListCreateView.as_view(),
        name="purchase-orders",
    ),
    path(
        "purchase-orders/<int:pk>/",
        PurchaseOrderDetailView.as_view(),
        name="purchase-order-detail",
    ),
    path(
        "purchase-orders/<int:pk>/confirm/",
        PurchaseOrderConfirmView.as_view(),
        name="purchase-order-confirm",
    ),
    path(
        "purchase-orders/<int:pk>/cancel/",
        PurchaseOrderCancelView.as_view(),
        name="purchase-order-cancel",
    ),
    path("vendor-bills/", VendorBillListCreateView.as_view(), name="vendor-bills"),
    path(
        "vendor-bills/<int:pk>/",
        VendorBillDetailView.as_view(),
        name="vendor-bill-detail",
    ),
    path(
        "vendor-payments/",
        VendorPaymentListCreateView.as_view(),
        name="vendor-payments",
    ),
]
