# accounting/api/views/documents.py

"""
PATH: accounting/api/views/documents.py

GENERIC DOCUMENT VIEWS

Purchase-side and sales-side endpoints share one shape; each app subclasses
these views and plugs in its queryset, serializers and service call.

- DocumentListCreateView: GET (filtered + paginated) / POST (service call)
- DocumentDetailView:     GET one document with lines
- OrderTransitionView:    POST confirm / cancel

Service errors are mapped by accounting.api.errors.service_error_response.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounting.api.errors import service_error_response
from accounting.services.exceptions import AccountingServiceError, NotFoundError


class DocumentListCreateView(GenericAPIView):
    permission_classes = [IsAuthenticated]
    filterset_fields = ["status", "contact"]

    read_serializer_class = None
    create_serializer_class = None
    action_name = "create_document"

    def get_serializer_class(self):
        if self.request is not None and self.request.method == "POST":
            return self.create_serializer_class
        return self.read_serializer_class

    def create_document(self, data):
        raise NotImplementedError

    def get(self, request):
        qs = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(
                self.read_serializer_class(page, many=True).data
            )
        return Response(
            self.read_serializer_class(qs, many=True).data, status=status.HTTP_200_OK
        )

    def post(self, request):
        s = self.create_serializer_class(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            document = self.create_document(s.validated_data)
        except AccountingServiceError as exc:
            return service_error_response(exc, action=self.action_name)

        return Response(
            self.read_serializer_class(document).data, status=status.HTTP_201_CREATED
        )


class DocumentDetailView(GenericAPIView):
    permission_classes = [IsAuthenticated]
    entity_name = "document"

    def get(self, request, pk: int):
        document = self.get_queryset().filter(pk=pk).first()
        if document is None:
            return service_error_response(
                NotFoundError(self.entity_name, pk), action=f"get_{self.entity_name}"
            )
        return Response(self.get_serializer(document).data, status=status.HTTP_200_OK)


class OrderTransitionView(GenericAPIView):
    permission_classes = [IsAuthenticated]
    action_name = "order_transition"

    def transition(self, *, order_id):
        raise NotImplementedError

    def post(self, request, pk: int):
        try:
            order = self.transition(order_id=pk)
        except AccountingServiceError as exc:
            return service_error_response(exc, action=self.action_name)

        return Response(self.get_serializer(order).data, status=status.HTTP_200_OK)
