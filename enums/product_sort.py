from enum import Enum


class ProductSort(str, Enum):
    """Sort orders accepted by the product listing."""
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    NEWEST = "newest"
