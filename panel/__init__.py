# panel/__init__.py
"""
Проект админ-панели: настройки, корневой API и маршруты
"""
