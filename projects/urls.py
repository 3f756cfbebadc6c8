from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("chemtrade.rest_api.urls")),
    path("api/", include("chemtrade_taxonomy.core.taxonomy.urls")),
    # path('__debug__/', include('debug_toolbar.urls')),
]
