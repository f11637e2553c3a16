from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path

from panel.api import api

admin.site.site_header = "Content admin"
admin.site.site_title = "Content admin"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
]

# Загруженные изображения отдаются самим Django только в режиме отладки
urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
