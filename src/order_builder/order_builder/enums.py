from enum import StrEnum


class Category(StrEnum):
    STARTERS = "starters"
    MAIN_COURSE = "main-course"
    SIDE_DISHES = "side-dishes"
    BEVERAGES = "beverages"
