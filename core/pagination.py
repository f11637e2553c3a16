"""
Постраничный вывод списков для админки: строки страницы + блок meta
"""
from typing import Any, Dict

from django.conf import settings


def paginate_queryset(queryset, page: int = 1, per_page: int = None) -> Dict[str, Any]:
    """
    Нарезает queryset на страницу.
    Страница за пределами списка возвращается пустой, номер страницы сохраняется.
    """
    per_page = per_page or settings.LIST_PAGE_SIZE
    page = page if page and page > 0 else 1

    total = queryset.count()
    last_page = max((total + per_page - 1) // per_page, 1)

    start = (page - 1) * per_page
    # За последней страницей строк нет, огромный offset в БД не отправляется
    rows = list(queryset[start:start + per_page]) if page <= last_page else []

    return {
        "data": rows,
        "meta": {
            "current_page": page,
            "last_page": last_page,
            "per_page": per_page,
            "total": total,
            "from": start + 1 if rows else None,
            "to": start + len(rows) if rows else None,
        },
    }
