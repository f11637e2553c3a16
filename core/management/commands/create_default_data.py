import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from articles.models import Category

DEFAULT_CATEGORIES = [
    'Technology',
    'Programming',
    'Design',
    'Business',
    'Personal',
]

class Command(BaseCommand):
    help = 'Creates default data for the application'

    def add_arguments(self, parser):
        parser.add_argument(
            '--with-admin',
            action='store_true',
            help='Also create a superuser from ADMIN_USERNAME / ADMIN_PASSWORD',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        # Создание категорий
        for cat_name in DEFAULT_CATEGORIES:
            category = Category.objects.filter(name=cat_name).first()
            if category:
                self.stdout.write(f'Category exists: {cat_name} ({category.slug})')
                continue
            category = Category.objects.create(name=cat_name)
            self.stdout.write(f'Created category: {cat_name} ({category.slug})')

        if options['with_admin']:
            self._create_admin()

        self.stdout.write(self.style.SUCCESS('Default data created successfully!'))

    def _create_admin(self):
        User = get_user_model()
        username = os.getenv('ADMIN_USERNAME', 'admin')
        password = os.getenv('ADMIN_PASSWORD', 'admin123')

        if User.objects.filter(username=username).exists():
            self.stdout.write(f'User exists: {username}')
            return

        User.objects.create_superuser(
            username=username,
            password=password,
            email=os.getenv('ADMIN_EMAIL', 'admin@example.com'),
        )
        self.stdout.write(f'Created superuser: {username}')
