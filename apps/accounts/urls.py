from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),

    # Current user and authorization gate
    path('user/', views.get_current_user, name='current-user'),
    path('access/', views.access_state, name='access-state'),
]
