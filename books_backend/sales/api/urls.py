# sales/api/urls.py

from django.urls import path

from sales.api.views import (
    SalesBillDetailView,
    SalesBillListCreateView,
    SalesOrderCancelView,
    SalesOrderConfirmView,
    SalesOrderDetailView,
    SalesOrderListCreateView,
    SalesPaymentListCreateView,
)

urlpatterns = [
    path("orders/", SalesOrderListCreateView.as_view(), name="sales-orders"),
    path(
        "orders/<int:pk>/",
        SalesOrderDetailView.as_view(),
        name="sales-order-detail",
    ),
    path(
        "orders/<int:pk>/confirm/",
        SalesOrderConfirmView.as_view(),
        name="sales-order-confirm",
    ),
    path(
        "orders/<int:pk>/cancel/",
        SalesOrderCancelView.as_view(),
        name="sales-order-cancel",
    ),
    path("bills/", SalesBillListCreateView.as_view(), name="sales-bills"),
    path(
        "bills/<int:pk>/",
        SalesBillDetailView.as_view(),
        name="sales-bill-detail",
    ),
    path("payments/", SalesPaymentListCreateView.as_view(), name="sales-payments"),
]
