from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'bills'

# Note: expenses and budgets must be registered BEFORE empty prefix
router = DefaultRouter()
router.register(r'expenses', views.ExpenseViewSet, basename='expense')
router.register(r'budgets', views.BudgetViewSet, basename='budget')
router.register(r'', views.BillViewSet, basename='bill')

urlpatterns = [
    # /api/bills/                - Bill CRUD
    # POST /api/bills/{id}/settle/ - Settle a pending bill
    # /api/bills/expenses/       - Expense CRUD (?period=YYYY-MM)
    # /api/bills/budgets/        - Budget CRUD
    path('', include(router.urls)),
]
