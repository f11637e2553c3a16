# uploads/__init__.py
"""
Загрузка изображений для редактора статей
"""
