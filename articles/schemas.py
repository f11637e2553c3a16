from ninja import Schema
from typing import List, Optional
from datetime import datetime

from core.schemas import ListFilters, MessageOut, PageMeta, RequiredName, RequiredStr, SlugStr
from users.schemas import AuthorOut

class CategoryIn(Schema):
    name: RequiredName

class CategoryUpdate(CategoryIn):
    slug: Optional[SlugStr] = None

class CategoryOut(Schema):
    id: int
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime

class CategorySummary(Schema):
    id: int
    name: str

class CategoryPage(Schema):
    data: List[CategoryOut]
    meta: PageMeta

class CategoryIndexOut(Schema):
    """Данные страницы списка категорий"""
    categories: CategoryPage
    filters: ListFilters

class CategoryMutationOut(MessageOut):
    category: CategoryOut

class ArticleIn(Schema):
    category_id: int
    title: RequiredName
    description: RequiredStr

class ArticleUpdate(ArticleIn):
    slug: Optional[SlugStr] = None

class ArticleOut(Schema):
    id: int
    title: str
    slug: str
    description: str
    category_id: Optional[int] = None
    category: Optional[CategorySummary] = None
    author: AuthorOut
    created_at: datetime
    updated_at: datetime

class ArticlePage(Schema):
    data: List[ArticleOut]
    meta: PageMeta

class ArticleIndexOut(Schema):
    """Данные страницы списка статей + категории для выпадающего списка формы"""
    articles: ArticlePage
    categories: List[CategorySummary]
    filters: ListFilters

class ArticleMutationOut(MessageOut):
    article: ArticleOut
