from ninja import Router, Query

from core.schemas import ErrorResponse, ListFilters, MessageOut, MAX_PAGE, ValidationErrorResponse
from articles.schemas import (
    ArticleIn, ArticleIndexOut, ArticleMutationOut, ArticleOut, ArticleUpdate,
    CategoryIn, CategoryIndexOut, CategoryMutationOut, CategoryOut, CategoryUpdate,
)
from articles.services import ArticleService, CategoryService

categories_router = Router(tags=["categories"])
articles_router = Router(tags=["articles"])

# Категории
@categories_router.get("", response=CategoryIndexOut, by_alias=True)
def list_categories(request, filters: ListFilters = Query(...), page: int = Query(1, le=MAX_PAGE)):
    """Страница списка категорий с поиском по имени"""
    return {
        "categories": CategoryService.list_categories(search=filters.search, page=page),
        "filters": {"search": filters.search},
    }

@categories_router.get("/{category}", response={200: CategoryOut, 404: ErrorResponse})
def get_category(request, category: str):
    """Получение категории по ID или slug"""
    return CategoryService.get_category(category)

@categories_router.post("", response={201: CategoryMutationOut, 422: ValidationErrorResponse})
def create_category(request, payload: CategoryIn):
    """Создание категории"""
    category = CategoryService.create_category(name=payload.name)
    return 201, {"message": "Category created successfully", "category": category}

@categories_router.put(
    "/{category}",
    response={200: CategoryMutationOut, 404: ErrorResponse, 422: ValidationErrorResponse},
)
def update_category(request, category: str, payload: CategoryUpdate):
    """Обновление категории"""
    instance = CategoryService.get_category(category)
    instance = CategoryService.update_category(instance, name=payload.name, slug=payload.slug)
    return {"message": "Category updated successfully", "category": instance}

@categories_router.delete("/{category}", response={200: MessageOut, 404: ErrorResponse})
def delete_category(request, category: str):
    """Удаление категории"""
    instance = CategoryService.get_category(category)
    CategoryService.delete_category(instance)
    return {"message": "Category deleted successfully"}

# Статьи
@articles_router.get("", response=ArticleIndexOut, by_alias=True)
def list_articles(request, filters: ListFilters = Query(...), page: int = Query(1, le=MAX_PAGE)):
    """Страница списка статей с поиском по заголовку"""
    return {
        "articles": ArticleService.list_articles(search=filters.search, page=page),
        "categories": CategoryService.list_category_options(),
        "filters": {"search": filters.search},
    }

@articles_router.get("/{slug}", response={200: ArticleOut, 404: ErrorResponse})
def get_article(request, slug: str):
    """Получение статьи по slug"""
    return ArticleService.get_article(slug)

@articles_router.post("", response={201: ArticleMutationOut, 422: ValidationErrorResponse})
def create_article(request, payload: ArticleIn):
    """Создание статьи, автор - текущий пользователь"""
    article = ArticleService.create_article(
        author=request.auth,
        category_id=payload.category_id,
        title=payload.title,
        description=payload.description,
    )
    return 201, {"message": "Article created successfully", "article": article}

@articles_router.put(
    "/{slug}",
    response={200: ArticleMutationOut, 404: ErrorResponse, 422: ValidationErrorResponse},
)
def update_article(request, slug: str, payload: ArticleUpdate):
    """Обновление статьи"""
    article = ArticleService.get_article(slug)
    article = ArticleService.update_article(
        article,
        category_id=payload.category_id,
        title=payload.title,
        description=payload.description,
        slug=payload.slug,
    )
    return {"message": "Article updated successfully", "article": article}

@articles_router.delete("/{slug}", response={200: MessageOut, 404: ErrorResponse})
def delete_article(request, slug: str):
    """Удаление статьи"""
    article = ArticleService.get_article(slug)
    ArticleService.delete_article(article)
    return {"message": "Article deleted successfully"}
