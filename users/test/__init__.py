"""
Тесты для приложения users
"""
