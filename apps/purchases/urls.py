from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'purchases'

# Note: shopping-list must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'shopping-list', views.ShoppingListViewSet, basename='shopping-list')
router.register(r'', views.PurchaseViewSet, basename='purchase')

urlpatterns = [
    # Purchase routes
    # GET    /api/purchases/              - List purchases
    # POST   /api/purchases/              - Purchase intake
    # GET    /api/purchases/{id}/         - Purchase with lines

    # Shopping list routes
    # GET    /api/purchases/shopping-list/           - List entries (?status=pending)
    # POST   /api/purchases/shopping-list/           - Add entry
    # PATCH  /api/purchases/shopping-list/{id}/      - Rename pending entry
    # DELETE /api/purchases/shopping-list/{id}/      - Remove pending entry
    # POST   /api/purchases/shopping-list/promote/   - Promote entries to a purchase
    path('', include(router.urls)),
]
