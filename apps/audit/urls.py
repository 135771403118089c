from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'audit'

router = DefaultRouter()
router.register(r'', views.AuditLogViewSet, basename='audit')

urlpatterns = [
    # GET    /api/audit/        - Household audit trail
    # GET    /api/audit/{id}/   - Single entry
    path('', include(router.urls)),
]
