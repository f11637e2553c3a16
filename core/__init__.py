# core/__init__.py
"""
Основное приложение с утилитами, middleware и общими функциями
"""
