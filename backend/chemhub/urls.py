from django.urls import include, path

urlpatterns = [
    path('', include('safety.urls')),
]
