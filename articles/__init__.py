# articles/__init__.py
"""
Приложение для управления статьями и категориями
"""
