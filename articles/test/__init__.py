"""
Тесты для приложения articles
"""
