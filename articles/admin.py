# articles/admin.py
from django.conf import settings
from django.contrib import admin
import structlog

from core.slugs import resolve_slug
from .models import Article, Category

logger = structlog.get_logger(__name__)

@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'created_at')
    search_fields = ('name',)
    ordering = ('-created_at', '-id')
    list_per_page = settings.ADMIN_PAGE_SIZE
    readonly_fields = ('created_at', 'updated_at')
    fields = ('name', 'slug', 'created_at', 'updated_at')

    def save_model(self, request, obj, form, change):
        # При изменении имени slug генерируется заново, если его не ввели вручную
        if change and 'name' in form.changed_data and 'slug' not in form.changed_data:
            obj.slug = resolve_slug(obj.name)
        elif not obj.slug:
            obj.slug = resolve_slug(obj.name)
        super().save_model(request, obj, form, change)
        logger.info(
            "category_saved_in_admin",
            category_id=obj.pk,
            created=not change,
            user_id=str(request.user.pk),
        )

@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ('title', 'slug', 'category', 'author', 'created_at')
    list_filter = ('category', 'created_at')
    search_fields = ('title',)
    ordering = ('-created_at', '-id')
    list_per_page = settings.ADMIN_PAGE_SIZE
    list_select_related = ('category', 'author')
    readonly_fields = ('author', 'created_at', 'updated_at')
    autocomplete_fields = ('category',)

    fieldsets = (
        (None, {
            'fields': ('title', 'slug', 'category', 'description')
        }),
        ('Relations', {
            'fields': ('author',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_form(self, request, obj=None, **kwargs):
        form = super().get_form(request, obj, **kwargs)
        # В админке категория обязательна, как и в API
        form.base_fields['category'].required = True
        return form

    def save_model(self, request, obj, form, change):
        # Автор берется из текущего пользователя админки
        if not change:
            obj.author = request.user
        if change and 'title' in form.changed_data and 'slug' not in form.changed_data:
            obj.slug = resolve_slug(obj.title)
        elif not obj.slug:
            obj.slug = resolve_slug(obj.title)
        super().save_model(request, obj, form, change)
        logger.info(
            "article_saved_in_admin",
            article_id=obj.pk,
            created=not change,
            user_id=str(request.user.pk),
        )
