from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),

    # User profile
    path('user/', views.get_current_user, name='current-user'),
    path('user/update/', views.update_profile, name='update-profile'),

    # Plan tier
    path('plan/', views.plan_status, name='plan'),
    path('plan/upgrade/', views.confirm_upgrade, name='plan-upgrade'),
]
