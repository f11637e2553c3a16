from django.test import TestCase

from core.exceptions import FormValidationError, NotFoundError
from users.models import User
from articles.models import Article, Category
from articles.services import ArticleService, CategoryService


class CategoryModelTestCase(TestCase):
    def test_slug_generated_on_save(self):
        category = Category.objects.create(name='Tech News')

        self.assertRegex(category.slug, r'^tech-news-\d{4}$')

    def test_explicit_slug_kept(self):
        category = Category.objects.create(name='Tech News', slug='tech')

        self.assertEqual(category.slug, 'tech')
        self.assertEqual(str(category), 'Tech News')

    def test_duplicate_slugs_allowed(self):
        Category.objects.create(name='One', slug='same')
        Category.objects.create(name='Two', slug='same')

        self.assertEqual(Category.objects.filter(slug='same').count(), 2)


class CategoryServiceTestCase(TestCase):
    def test_create_and_update(self):
        category = CategoryService.create_category(name='Design')
        self.assertRegex(category.slug, r'^design-\d{4}$')

        updated = CategoryService.update_category(category, name='Web Design')
        self.assertEqual(updated.name, 'Web Design')
        self.assertRegex(updated.slug, r'^web-design-\d{4}$')

        updated = CategoryService.update_category(category, name='Web Design', slug='web')
        self.assertEqual(Category.objects.get(pk=category.pk).slug, 'web')

    def test_get_category_by_id_or_slug(self):
        category = Category.objects.create(name='Business', slug='business-1000')

        self.assertEqual(CategoryService.get_category(category.id), category)
        self.assertEqual(CategoryService.get_category(str(category.id)), category)
        self.assertEqual(CategoryService.get_category('business-1000'), category)

    def test_get_category_duplicate_slug_returns_newest(self):
        Category.objects.create(name='Old', slug='dup')
        newest = Category.objects.create(name='New', slug='dup')

        self.assertEqual(CategoryService.get_category('dup'), newest)

    def test_get_missing_category(self):
        with self.assertRaises(NotFoundError) as ctx:
            CategoryService.get_category('nothing-here')

        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.code, 'category_not_found')

    def test_get_category_unicode_digits(self):
        Category.objects.create(name="Squared", slug="sq")

        with self.assertRaises(NotFoundError):
            CategoryService.get_category("\u00b2")

    def test_list_ignores_blank_search(self):
        Category.objects.create(name='A')
        Category.objects.create(name='B')

        result = CategoryService.list_categories(search='   ')

        self.assertEqual(result['meta']['total'], 2)

    def test_options_sorted_by_name(self):
        Category.objects.create(name='Zeta')
        Category.objects.create(name='Alpha')

        names = [c.name for c in CategoryService.list_category_options()]
        self.assertEqual(names, ['Alpha', 'Zeta'])


class ArticleServiceTestCase(TestCase):
    def setUp(self):
        self.author = User.objects.create_user(
            username='author',
            password='testpass123',
            first_name='Jane',
            last_name='Doe',
        )
        self.category = Category.objects.create(name='Technology')

    def test_create_article(self):
        article = ArticleService.create_article(
            author=self.author,
            category_id=self.category.id,
            title='Hello World',
            description='<p>Body</p>',
        )

        self.assertRegex(article.slug, r'^hello-world-\d{4}$')
        self.assertEqual(article.author, self.author)
        self.assertEqual(article.category, self.category)

    def test_create_with_unknown_category(self):
        with self.assertRaises(FormValidationError) as ctx:
            ArticleService.create_article(
                author=self.author,
                category_id=999999,
                title='Orphan',
                description='Text',
            )

        self.assertEqual(ctx.exception.status_code, 422)
        self.assertIn('category_id', ctx.exception.errors)
        self.assertFalse(Article.objects.exists())

    def test_update_article(self):
        article = ArticleService.create_article(
            author=self.author,
            category_id=self.category.id,
            title='Draft',
            description='Text',
        )
        other = Category.objects.create(name='Science')

        ArticleService.update_article(
            article,
            category_id=other.id,
            title='Final',
            description='New text',
            slug='final',
        )

        article.refresh_from_db()
        self.assertEqual(article.title, 'Final')
        self.assertEqual(article.slug, 'final')
        self.assertEqual(article.category, other)
        self.assertEqual(article.author, self.author)

    def test_delete_category_keeps_articles(self):
        article = Article.objects.create(
            category=self.category,
            author=self.author,
            title='Survivor',
            description='Text',
        )

        CategoryService.delete_category(self.category)

        article.refresh_from_db()
        self.assertIsNone(article.category)

    def test_delete_author_removes_articles(self):
        Article.objects.create(category=self.category, author=self.author, title='Gone', description='Text')

        self.author.delete()

        self.assertFalse(Article.objects.exists())

    def test_search_matches_title_only(self):
        Article.objects.create(category=self.category, author=self.author, title='Python tips', description='x')
        Article.objects.create(category=self.category, author=self.author, title='Other', description='python')

        result = ArticleService.list_articles(search='PYTHON')

        self.assertEqual([a.title for a in result['data']], ['Python tips'])

    def test_get_missing_article(self):
        with self.assertRaises(NotFoundError):
            ArticleService.get_article('missing')

        article = ArticleService.create_article(
            author=self.author,
            category_id=self.category.id,
            title='Present',
            description='Text',
        )
        self.assertEqual(ArticleService.get_article(article.slug), article)
