from django.urls import path
from . import views

app_name = 'tracking'

urlpatterns = [
    path('track/<str:quote_id>/', views.track_order, name='track-order'),
    path('activities/', views.activities, name='activities'),
]
