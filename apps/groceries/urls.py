from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'groceries'

router = DefaultRouter()
router.register(r'items', views.ItemViewSet, basename='item')
router.register(r'categories', views.CategoryViewSet, basename='category')
router.register(r'inventory', views.InventoryViewSet, basename='inventory')
router.register(r'waste', views.WasteEventViewSet, basename='waste')

urlpatterns = [
    # /api/groceries/items/        - Item catalog CRUD
    # /api/groceries/categories/   - Category CRUD
    # /api/groceries/inventory/    - Inventory CRUD (?expiring_within=7)
    # GET  /api/groceries/waste/   - Waste log
    # POST /api/groceries/waste/   - Record waste
    path('', include(router.urls)),
]
