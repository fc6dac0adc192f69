# sales/api/views.py

"""
SALES API

- /api/sales/orders/                 GET list, POST create
- /api/sales/orders/<id>/            GET
- /api/sales/orders/<id>/confirm/ | cancel/   POST
- /api/sales/bills/                  GET list, POST create (customer invoice)
- /api/sales/bills/<id>/             GET
- /api/sales/payments/               GET list, POST receive payment for a bill
"""

from drf_spectacular.utils import extend_schema, extend_schema_view

from accounting.api.serializers import OrderCreateSerializer, SettlementCreateSerializer
from accounting.api.views.documents import (
    DocumentDetailView,
    DocumentListCreateView,
    OrderTransitionView,
)
from sales.api.serializers import (
    SalesBillCreateSerializer,
    SalesBillSerializer,
    SalesOrderSerializer,
    SalesPaymentSerializer,
)
from sales.models import SalesBill, SalesOrder, SalesPayment
from sales.services.document_service import (
    cancel_sales_order,
    confirm_sales_order,
    create_sales_bill,
    create_sales_order,
)
from sales.services.payment_service import receive_sales_payment


@extend_schema_view(
    get=extend_schema(tags=["sales"], responses=SalesOrderSerializer(many=True)),
    post=extend_schema(
        tags=["sales"],
        request=OrderCreateSerializer,
        responses={201: SalesOrderSerializer},
    ),
)
class SalesOrderListCreateView(DocumentListCreateView):
    queryset = SalesOrder.objects.select_related("contact").order_by("-order_date", "-number")
    read_serializer_class = SalesOrderSerializer
    create_serializer_class = OrderCreateSerializer
    action_name = "create_sales_order"

    def create_document(self, data):
        return create_sales_order(
            contact_id=data["contact_id"],
            order_date=data.get("order_date"),
            reference=data.get("reference", ""),
            lines=data["lines"],
        )


@extend_schema(tags=["sales"], responses=SalesOrderSerializer)
class SalesOrderDetailView(DocumentDetailView):
    queryset = SalesOrder.objects.select_related("contact")
    serializer_class = SalesOrderSerializer
    entity_name = "sales_order"


@extend_schema(tags=["sales"], request=None, responses=SalesOrderSerializer)
class SalesOrderConfirmView(OrderTransitionView):
    serializer_class = SalesOrderSerializer
    action_name = "confirm_sales_order"

    def transition(self, *, order_id):
        return confirm_sales_order(order_id=order_id)


@extend_schema(tags=["sales"], request=None, responses=SalesOrderSerializer)
class SalesOrderCancelView(OrderTransitionView):
    serializer_class = SalesOrderSerializer
    action_name = "cancel_sales_order"

    def transition(self, *, order_id):
        return cancel_sales_order(order_id=order_id)


@extend_schema_view(
    get=extend_schema(tags=["sales"], responses=SalesBillSerializer(many=True)),
    post=extend_schema(
        tags=["sales"],
        request=SalesBillCreateSerializer,
        responses={201: SalesBillSerializer},
    ),
)
class SalesBillListCreateView(DocumentListCreateView):
    queryset = SalesBill.objects.select_related("contact", "sales_order").order_by(
        "-bill_date", "-number"
    )
    read_serializer_class = SalesBillSerializer
    create_serializer_class = SalesBillCreateSerializer
    action_name = "create_sales_bill"

    def create_document(self, data):
        return create_sales_bill(
            sales_order_id=data.get("sales_order_id"),
            customer_name=data.get("customer_name"),
            bill_date=data.get("bill_date"),
            due_date=data.get("due_date"),
            bill_reference=data.get("bill_reference"),
            line_items=data.get("line_items"),
        )


@extend_schema(tags=["sales"], responses=SalesBillSerializer)
class SalesBillDetailView(DocumentDetailView):
    queryset = SalesBill.objects.select_related("contact", "sales_order")
    serializer_class = SalesBillSerializer
    entity_name = "sales_bill"


@extend_schema_view(
    get=extend_schema(tags=["sales"], responses=SalesPaymentSerializer(many=True)),
    post=extend_schema(
        tags=["sales"],
        request=SettlementCreateSerializer,
        responses={201: SalesPaymentSerializer},
    ),
)
class SalesPaymentListCreateView(DocumentListCreateView):
    queryset = SalesPayment.objects.select_related("contact", "bill", "journal").order_by(
        "-payment_date", "-number"
    )
    filterset_fields = ["payment_type", "contact"]
    read_serializer_class = SalesPaymentSerializer
    create_serializer_class = SettlementCreateSerializer
    action_name = "receive_sales_payment"

    def create_document(self, data):
        return receive_sales_payment(
            bill_id=data["bill_id"],
            account_id=data["journal_id"],
            payment_date=data.get("payment_date"),
            note=data.get("note", ""),
        )
