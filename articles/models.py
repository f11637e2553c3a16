from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.slugs import generate_slug


class Category(models.Model):
    """
    Категория статей
    """
    name = models.CharField(
        _('name'),
        max_length=255,
    )
    # Уникальность slug не требуется: суффикс делает коллизии маловероятными
    slug = models.CharField(
        _('slug'),
        max_length=255,
        blank=True,
        db_index=True,
    )
    created_at = models.DateTimeField(
        _('created at'),
        auto_now_add=True,
        db_index=True
    )
    updated_at = models.DateTimeField(
        _('updated at'),
        auto_now=True
    )

    class Meta:
        verbose_name = _('category')
        verbose_name_plural = _('categories')
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        """
        Переопределяем save для генерации slug
        """
        if not self.slug:
            self.slug = generate_slug(self.name)
        super().save(*args, **kwargs)


class Article(models.Model):
    """
    Статья: заголовок, описание в HTML и ссылки на категорию и автора
    """
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        related_name='articles',
        verbose_name=_('category'),
        blank=True,
        null=True
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='articles',
        verbose_name=_('author')
    )
    title = models.CharField(
        _('title'),
        max_length=255,
    )
    slug = models.CharField(
        _('slug'),
        max_length=255,
        blank=True,
        db_index=True,
    )
    description = models.TextField(
        _('description'),
        help_text=_('Rich text (HTML)')
    )
    created_at = models.DateTimeField(
        _('created at'),
        auto_now_add=True,
        db_index=True
    )
    updated_at = models.DateTimeField(
        _('updated at'),
        auto_now=True
    )

    class Meta:
        verbose_name = _('article')
        verbose_name_plural = _('articles')
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = generate_slug(self.title)
        super().save(*args, **kwargs)
