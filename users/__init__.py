# users/__init__.py
"""
Приложение для управления пользователями и аутентификацией
"""
