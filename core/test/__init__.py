"""
Тесты для core приложения
"""
