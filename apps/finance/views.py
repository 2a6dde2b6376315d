from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.accounts.permissions import IsAccountOwner
from .exceptions import FinanceServiceError, ExpenseNotFoundError
from .models import FixedExpense
from .reports import FinanceReports
from .serializers import (
    SummaryQuerySerializer,
    FixedExpenseSerializer,
    SummaryResponseSerializer,
    WeeklyPointSerializer,
    DashboardResponseSerializer,
    ErrorSerializer,
)
from .services import create_expense, update_expense, delete_expense

@extend_schema_view(
    list=extend_schema(tags=['finance']),
    retrieve=extend_schema(tags=['finance']),
    create=extend_schema(tags=['finance']),
    update=extend_schema(tags=['finance']),
    partial_update=extend_schema(tags=['finance']),
    destroy=extend_schema(tags=['finance']),
)
class FixedExpenseViewSet(viewsets.ModelViewSet):
    """
    Fixed monthly expenses of the current account.

    list: Get all expenses
    create: Add an expense
    retrieve: Get an expense
    update / partial_update: Edit an expense
    destroy: Delete an expense
    """

    serializer_class = FixedExpenseSerializer
    permission_classes = [IsAuthenticated, IsAccountOwner]
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        return FixedExpense.objects.filter(owner=self.request.user)

    def perform_create(self, serializer):
        serializer.instance = create_expense(owner=self.request.user, **serializer.validated_data)

    def update(self, request, *args, **kwargs):
        """Apply the fields sent; PUT and PATCH behave the same."""
        serializer = FixedExpenseSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            expense = update_expense(
                owner=request.user,
                expense_id=kwargs['pk'],
                **serializer.validated_data
            )
        except ExpenseNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(FixedExpenseSerializer(expense).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_expense(owner=request.user, expense_id=kwargs['pk'])
        except ExpenseNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    parameters=[SummaryQuerySerializer],
    responses={
        200: SummaryResponseSerializer,
        400: ErrorSerializer,
    },
    description=(
        "Revenue, parts investment, fixed expenses and real profit. "
        "With ?month=YYYY-MM only that month's orders are counted; fixed "
        "expenses are monthly costs and are always charged in full."
    ),
    tags=['finance'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def financial_summary(request):
    """Financial summary - thin HTTP handler."""
    query_serializer = SummaryQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    month = query_serializer.validated_data.get('month') or None

    try:
        data = FinanceReports.summary(request.user, month=month)
    except FinanceServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(SummaryResponseSerializer(data).data)


@extend_schema(
    responses={200: WeeklyPointSerializer(many=True)},
    description="Labor revenue per day for the last seven days, oldest first.",
    tags=['finance'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def weekly_revenue(request):
    data = FinanceReports.weekly(request.user)
    return Response(WeeklyPointSerializer(data, many=True).data)


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="All-time summary, the 7-day labor chart and the five latest orders.",
    tags=['finance'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """Dashboard data in one request."""
    data = FinanceReports.dashboard(request.user)
    return Response(DashboardResponseSerializer(data).data)
