from django.urls import path
from .views import analyze_product_api, health, product_suggestions_api, search_page

urlpatterns = [
    path('', search_page, name='search'),
    path('health', health, name='health'),
    path('analyze', analyze_product_api, name='analyze'),
    path('api/analyze/', analyze_product_api, name='api-analyze'),
    path('api/products/', product_suggestions_api, name='suggestions'),
]
