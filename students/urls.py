from django.urls import path
from . import views

urlpatterns = [
    path('result-slip/<int:student_id>/', views.download_result_slip, name='download_result_slip'),
]
# End of file students/urls.py
