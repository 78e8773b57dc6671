from typing import List

from .models import Category


class UnknownCategoryError(KeyError):
    pass


CATEGORIES: List[Category] = [
    Category(id="1", title="ОФИСНАЯ ЙОГА", image="office.png", url="office_yoga"),
    Category(id="2", title="ЗДОРОВАЯ СПИНА", image="back.png", url="healthy_back"),
    Category(id="3", title="СИЛОВАЯ ЙОГА", image="power.png", url="power_yoga"),
    Category(id="4", title="РАСТЯЖКА и ГИБКОСТЬ", image="stretch.png", url="stretching"),
    Category(id="5", title="РАСТЯЖКА ДЛЯ\nТЕЛА И УМА", image="beginner.png", url="beginners"),
    Category(id="6", title="ВОССТАНАВЛИВАЮЩАЯ ЙОГА", image="recovery.png", url="restorative"),
    Category(id="7", title="МЕДИТАТИВНАЯ ЙОГА", image="meditation.png", url="meditative"),
    Category(id="8", title="ЙОГА ДЛЯ УЛУЧШЕНИЯ СНА", image="sleep.png", url="sleep"),
    Category(id="9", title="ДИНАМИЧНАЯ ЙОГА", image="dinamic.png", url="dynamic"),
    Category(id="10", title="КЛАССИЧЕСКАЯ ХАТХА ЙОГА", image="yoga.png", url="classical"),
]


def list_categories() -> List[Category]:
    return list(CATEGORIES)


def get_category(slug: str) -> Category:
    for c in CATEGORIES:
        if c.url == slug:
            return c
    raise UnknownCategoryError(slug)
