from django.urls import path
from . import views

urlpatterns = [
    path('<slug:report_type>/', views.export_report, name='export_report'),
]
