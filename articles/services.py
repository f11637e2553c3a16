"""
Сервисный слой статей и категорий - содержит бизнес-логику
"""
from typing import Any, Dict, Optional

from django.db import transaction
import structlog

from core.exceptions import FormValidationError, NotFoundError
from core.logging_config import log_operation
from core.pagination import paginate_queryset
from core.slugs import resolve_slug

from .models import Article, Category

logger = structlog.get_logger(__name__)


def _normalize_search(search: Optional[str]) -> Optional[str]:
    search = (search or '').strip()
    return search or None


class CategoryService:
    """
    Сервис категорий
    """

    @staticmethod
    @log_operation("list_categories")
    def list_categories(search: Optional[str] = None, page: int = 1) -> Dict[str, Any]:
        """
        Список категорий, новые первыми, с поиском по имени
        """
        queryset = Category.objects.all()

        search = _normalize_search(search)
        if search:
            queryset = queryset.filter(name__icontains=search)

        result = paginate_queryset(queryset.order_by('-created_at', '-id'), page)

        logger.info(
            "categories_listed",
            search=search,
            page=result["meta"]["current_page"],
            total=result["meta"]["total"],
        )
        return result

    @staticmethod
    def list_category_options():
        """Все категории для выпадающего списка в форме статьи"""
        return Category.objects.order_by('name', 'id')

    @staticmethod
    def get_category(reference) -> Category:
        """
        Категория по ID, нечисловая ссылка ищется по slug
        """
        reference = str(reference).strip()
        if reference.isascii() and reference.isdigit():
            category = Category.objects.filter(pk=int(reference)).first()
        else:
            category = Category.objects.filter(slug=reference).order_by('-created_at', '-id').first()

        if category is None:
            raise NotFoundError("Category not found", code="category_not_found")
        return category

    @staticmethod
    @log_operation("create_category")
    def create_category(name: str) -> Category:
        with transaction.atomic():
            category = Category(name=name)
            category.slug = resolve_slug(name)
            category.save()

        logger.info("category_created", category_id=category.id, slug=category.slug)
        return category

    @staticmethod
    @log_operation("update_category")
    def update_category(category: Category, name: str, slug: Optional[str] = None) -> Category:
        """
        Перезаписывает имя; slug берется из запроса или генерируется заново
        """
        with transaction.atomic():
            category.name = name
            category.slug = resolve_slug(name, slug)
            category.save()

        logger.info("category_updated", category_id=category.id, slug=category.slug)
        return category

    @staticmethod
    @log_operation("delete_category")
    def delete_category(category: Category) -> None:
        # Статьи категории остаются, ссылка на категорию обнуляется (SET_NULL)
        category_id = category.id
        with transaction.atomic():
            category.delete()

        logger.info("category_deleted", category_id=category_id)


class ArticleService:
    """
    Сервис статей
    """

    @staticmethod
    @log_operation("list_articles")
    def list_articles(search: Optional[str] = None, page: int = 1) -> Dict[str, Any]:
        """
        Список статей, новые первыми, с поиском по заголовку
        """
        queryset = Article.objects.select_related('category', 'author')

        search = _normalize_search(search)
        if search:
            queryset = queryset.filter(title__icontains=search)

        result = paginate_queryset(queryset.order_by('-created_at', '-id'), page)

        logger.info(
            "articles_listed",
            search=search,
            page=result["meta"]["current_page"],
            total=result["meta"]["total"],
        )
        return result

    @staticmethod
    def get_article(slug: str) -> Article:
        article = (
            Article.objects.select_related('category', 'author')
            .filter(slug=slug)
            .order_by('-created_at', '-id')
            .first()
        )
        if article is None:
            raise NotFoundError("Article not found", code="article_not_found")
        return article

    @staticmethod
    def _resolve_category(category_id: int) -> Category:
        category = Category.objects.filter(pk=category_id).first()
        if category is None:
            raise FormValidationError({"category_id": "The selected category id is invalid."})
        return category

    @staticmethod
    @log_operation("create_article")
    def create_article(author, category_id: int, title: str, description: str) -> Article:
        """
        Создание статьи; автор передается явно из аутентифицированного запроса
        """
        category = ArticleService._resolve_category(category_id)

        with transaction.atomic():
            article = Article(
                category=category,
                author=author,
                title=title,
                slug=resolve_slug(title),
                description=description,
            )
            article.save()

        logger.info(
            "article_created",
            article_id=article.id,
            slug=article.slug,
            author_id=str(author.pk),
            category_id=category.id,
        )
        return article

    @staticmethod
    @log_operation("update_article")
    def update_article(
        article: Article,
        category_id: int,
        title: str,
        description: str,
        slug: Optional[str] = None,
    ) -> Article:
        category = ArticleService._resolve_category(category_id)

        with transaction.atomic():
            article.category = category
            article.title = title
            article.description = description
            article.slug = resolve_slug(title, slug)
            article.save()

        logger.info("article_updated", article_id=article.id, slug=article.slug)
        return article

    @staticmethod
    @log_operation("delete_article")
    def delete_article(article: Article) -> None:
        article_id = article.id
        with transaction.atomic():
            article.delete()

        logger.info("article_deleted", article_id=article_id)
