import pytest
from django.test import Client
import factory
from factory.django import DjangoModelFactory
from ninja_jwt.tokens import RefreshToken

from articles.models import Article, Category
from users.models import User

# Фабрики
class UserFactory(DjangoModelFactory):
    class Meta:
        model = User

    username = factory.Sequence(lambda n: f'testuser{n}')
    email = factory.LazyAttribute(lambda obj: f'{obj.username}@example.com')
    password = 'testpassword123'
    is_active = True

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        manager = cls._get_manager(model_class)
        return manager.create_user(*args, **kwargs)

class SuperUserFactory(UserFactory):
    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        manager = cls._get_manager(model_class)
        return manager.create_superuser(*args, **kwargs)

class CategoryFactory(DjangoModelFactory):
    class Meta:
        model = Category

    name = factory.Sequence(lambda n: f'Category {n}')

class ArticleFactory(DjangoModelFactory):
    class Meta:
        model = Article

    title = factory.Sequence(lambda n: f'Test Article {n}')
    description = factory.Faker('paragraph')
    author = factory.SubFactory(UserFactory)
    category = factory.SubFactory(CategoryFactory)

# Фикстуры
@pytest.fixture
def api_client():
    """Django тестовый клиент без аутентификации"""
    return Client()

@pytest.fixture
def user():
    """Создает обычного пользователя"""
    return UserFactory(first_name='Test', last_name='Author')

@pytest.fixture
def admin_user():
    """Создает администратора"""
    return SuperUserFactory()

@pytest.fixture
def access_token(user):
    """JWT access токен для пользователя"""
    return str(RefreshToken.for_user(user).access_token)

@pytest.fixture
def authenticated_client(access_token):
    """Клиент с аутентификацией"""
    return Client(HTTP_AUTHORIZATION=f'Bearer {access_token}')

@pytest.fixture
def category():
    """Создает категорию"""
    return CategoryFactory(name='Technology')

@pytest.fixture
def article(user, category):
    """Создает статью"""
    return ArticleFactory(author=user, category=category)

@pytest.fixture
def media_root(settings, tmp_path):
    """Загружаемые файлы пишутся во временную директорию"""
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path

@pytest.fixture(autouse=True)
def enable_db_access_for_all_tests(db):
    """Разрешает доступ к БД для всех тестов"""
    pass

@pytest.fixture(autouse=True)
def setup_logging():
    """Настройка логирования для тестов"""
    import logging
    logging.getLogger('django').setLevel(logging.ERROR)
    logging.getLogger('panel').setLevel(logging.ERROR)
    logging.getLogger('core').setLevel(logging.ERROR)

# Хелперы для тестов
class TestHelpers:
    @staticmethod
    def assert_response_ok(response, expected_status=200):
        assert response.status_code == expected_status, response.content
        return response.json()

    @staticmethod
    def assert_response_error(response, expected_status=400):
        assert response.status_code == expected_status, response.content
        data = response.json()
        assert 'detail' in data
        return data

    @staticmethod
    def assert_validation_error(response, *fields):
        assert response.status_code == 422, response.content
        data = response.json()
        for field in fields:
            assert field in data['errors'], data
        return data

    @staticmethod
    def create_test_articles(count=5, **kwargs):
        """Создание нескольких тестовых статей"""
        return [ArticleFactory(**kwargs) for _ in range(count)]

# Регистрируем хелперы
@pytest.fixture
def helpers():
    return TestHelpers
