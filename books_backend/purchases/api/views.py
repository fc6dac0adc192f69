# purchases/api/views.py

"""
PURCHASES API

- /api/purchase-orders/            GET list, POST create
- /api/purchase-orders/<id>/       GET
- /api/purchase-orders/<id>/confirm/ | cancel/   POST
- /api/vendor-bills/               GET list, POST create (from order or lines)
- /api/vendor-bills/<id>/          GET
- /api/vendor-payments/            GET list, POST settle a bill
"""

from drf_spectacular.utils import extend_schema, extend_schema_view

from accounting.api.serializers import OrderCreateSerializer, SettlementCreateSerializer
from accounting.api.views.documents import (
    DocumentDetailView,
    DocumentListCreateView,
    OrderTransitionView,
)
from purchases.api.serializers import (
    PurchaseOrderSerializer,
    VendorBillCreateSerializer,
    VendorBillSerializer,
    VendorPaymentSerializer,
)
from purchases.models import PurchaseOrder, VendorBill, VendorPayment
from purchases.services.document_service import (
    cancel_purchase_order,
    confirm_purchase_order,
    create_purchase_order,
    create_vendor_bill,
)
from purchases.services.payment_service import pay_vendor_bill


@extend_schema_view(
    get=extend_schema(tags=["purchases"], responses=PurchaseOrderSerializer(many=True)),
    post=extend_schema(
        tags=["purchases"],
        request=OrderCreateSerializer,
        responses={201: PurchaseOrderSerializer},
    ),
)
class PurchaseOrderListCreateView(DocumentListCreateView):
    queryset = PurchaseOrder.objects.select_related("contact").order_by("-order_date", "-number")
    read_serializer_class = PurchaseOrderSerializer
    create_serializer_class = OrderCreateSerializer
    action_name = "create_purchase_order"

    def create_document(self, data):
        return create_purchase_order(
            contact_id=data["contact_id"],
            order_date=data.get("order_date"),
            reference=data.get("reference", ""),
            lines=data["lines"],
        )


@extend_schema(tags=["purchases"], responses=PurchaseOrderSerializer)
class PurchaseOrderDetailView(DocumentDetailView):
    queryset = PurchaseOrder.objects.select_related("contact")
    serializer_class = PurchaseOrderSerializer
    entity_name = "purchase_order"


@extend_schema(tags=["purchases"], request=None, responses=PurchaseOrderSerializer)
class PurchaseOrderConfirmView(OrderTransitionView):
    serializer_class = PurchaseOrderSerializer
    action_name = "confirm_purchase_order"

    def transition(self, *, order_id):
        return confirm_purchase_order(order_id=order_id)


@extend_schema(tags=["purchases"], request=None, responses=PurchaseOrderSerializer)
class PurchaseOrderCancelView(OrderTransitionView):
    serializer_class = PurchaseOrderSerializer
    action_name = "cancel_purchase_order"

    def transition(self, *, order_id):
        return cancel_purchase_order(order_id=order_id)


@extend_schema_view(
    get=extend_schema(tags=["purchases"], responses=VendorBillSerializer(many=True)),
    post=extend_schema(
        tags=["purchases"],
        request=VendorBillCreateSerializer,
        responses={201: VendorBillSerializer},
    ),
)
class VendorBillListCreateView(DocumentListCreateView):
    queryset = VendorBill.objects.select_related("contact", "purchase_order").order_by(
        "-bill_date", "-number"
    )
    read_serializer_class = VendorBillSerializer
    create_serializer_class = VendorBillCreateSerializer
    action_name = "create_vendor_bill"

    def create_document(self, data):
        return create_vendor_bill(
            purchase_order_id=data.get("purchase_order_id"),
            vendor_name=data.get("vendor_name"),
            bill_date=data.get("bill_date"),
            due_date=data.get("due_date"),
            bill_reference=data.get("bill_reference"),
            lines=data.get("lines"),
        )


@extend_schema(tags=["purchases"], responses=VendorBillSerializer)
class VendorBillDetailView(DocumentDetailView):
    queryset = VendorBill.objects.select_related("contact", "purchase_order")
    serializer_class = VendorBillSerializer
    entity_name = "vendor_bill"


@extend_schema_view(
    get=extend_schema(tags=["purchases"], responses=VendorPaymentSerializer(many=True)),
    post=extend_schema(
        tags=["purchases"],
        request=SettlementCreateSerializer,
        responses={201: VendorPaymentSerializer},
    ),
)
class VendorPaymentListCreateView(DocumentListCreateView):
    queryset = VendorPayment.objects.select_related("contact", "bill", "journal").order_by(
        "-payment_date", "-number"
    )
    filterset_fields = ["payment_type", "contact"]
    read_serializer_class = VendorPaymentSerializer
    create_serializer_class = SettlementCreateSerializer
    action_name = "pay_vendor_bill"

    def create_document(self, data):
        return pay_vendor_bill(
            bill_id=data["bill_id"],
            account_id=data["journal_id"],
            payment_date=data.get("payment_date"),
            note=data.get("note", ""),
        )
