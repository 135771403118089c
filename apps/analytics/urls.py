from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    path('summary/', views.period_summary, name='summary'),
    path('dashboard/', views.dashboard, name='dashboard'),
]
