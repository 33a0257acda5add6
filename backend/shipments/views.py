from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsApprovedClient
from inventory.services import snapshot_for
from pricing.repository import load_pricing_tables
from pricing.services.pricing_service import reprice_lines
from pricing.services.utils import ZERO, round2
from .dataclasses import ShipmentLine
from .models import ShipmentRequest
from .serializers import (
    PricedLineSerializer,
    ShipmentPreviewSerializer,
    ShipmentRequestFormSerializer,
    ShipmentRequestSerializer,
    context_from,
)
from .services.errors import AuthenticationRequiredError, InsufficientStockError, SubmissionError
from .services.lines import toggle_line
from .services.stock import validate_stock
from .services.submission import ensure_can_submit, submit_shipment_request


class ShipmentRequestListCreateView(APIView):
    """The signed-in client's shipment requests; POST submits a new one."""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        requests = (ShipmentRequest.objects
                    .filter(user=request.user)
                    .prefetch_related('shipments'))
        return Response(ShipmentRequestSerializer(requests, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        user = request.user
        try:
            ensure_can_submit(user)
        except AuthenticationRequiredError as e:
            return Response({"detail": str(e)}, status=status.HTTP_403_FORBIDDEN)

        idempotency_key = request.headers.get('Idempotency-Key')

        # Return prior result if same idempotency key was used
        if idempotency_key:
            existing = ShipmentRequest.objects.filter(user=user, idempotency_key=idempotency_key).first()
            if existing:
                return Response(ShipmentRequestSerializer(existing).data, status=status.HTTP_200_OK)

        ser = ShipmentRequestFormSerializer(
            data=request.data,
            context={'request': request, 'pricing_tables': load_pricing_tables(user)},
        )
        ser.is_valid(raise_exception=True)

        try:
            shipment_request = submit_shipment_request(
                ser.validated_data,
                user,
                snapshot_for(user),
                idempotency_key=idempotency_key,
            )
        except InsufficientStockError as e:
            return Response(
                {"detail": "Insufficient stock", "errors": [str(err) for err in e.errors]},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except SubmissionError as e:
            return Response({"detail": str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(ShipmentRequestSerializer(shipment_request).data, status=status.HTTP_201_CREATED)


class ShipmentRequestPreviewView(APIView):
    """
    Price a draft shipment request and report stock problems without saving.

    An optional `toggle` selects or deselects one product before pricing.
    """
    permission_classes = [IsApprovedClient]

    def post(self, request):
        ser = ShipmentPreviewSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        context = context_from(data)
        tables = load_pricing_tables(request.user)
        lines = [ShipmentLine.from_mapping(line) for line in data.get("shipments", [])]

        toggle = data.get("toggle")
        if toggle:
            lines = toggle_line(lines, toggle["product_id"], toggle["selected"], context, tables)

        reprice_lines(lines, context, tables)
        stock_errors = validate_stock(lines, snapshot_for(request.user), data["shipment_type"])

        return Response(
            {
                "shipments": PricedLineSerializer(lines, many=True).data,
                "total_price": str(round2(sum((line.total_price for line in lines), ZERO))),
                "stock_errors": [err.to_dict() for err in stock_errors],
            },
            status=status.HTTP_200_OK,
        )
