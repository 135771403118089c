from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'households'

router = DefaultRouter()
router.register(r'', views.HouseholdViewSet, basename='household')

urlpatterns = [
    # GET    /api/households/               - List my households
    # POST   /api/households/               - Create household
    # GET    /api/households/{id}/          - Household details
    # GET    /api/households/{id}/members/  - List members
    # POST   /api/households/{id}/members/  - Add member by email (owner)
    path('', include(router.urls)),
]
