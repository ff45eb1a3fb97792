"""
Category-related exceptions.
"""

from .base import StoreException, NotFoundException, InvalidRequestException, ConflictException


class CategoryException(StoreException):
    """Base exception for category-related errors."""
    pass


class CategoryNotFoundException(CategoryException, NotFoundException):
    """Raised when category is not found in database."""

    def __init__(self, category_id: int):
        super().__init__(
            "Category not found",
            details={'category_id': category_id}
        )
        self.category_id = category_id


class UnknownCategoryReferenceException(CategoryException, InvalidRequestException):
    """Raised when a product payload references a category that does not exist."""

    def __init__(self, category_id: int):
        super().__init__(
            "Category not found",
            details={'category_id': category_id}
        )
        self.category_id = category_id


class CategoryAlreadyExistsException(CategoryException, ConflictException):
    """Raised when a category with the same slug already exists."""

    def __init__(self, name: str, slug: str):
        super().__init__(
            "Category with this name already exists",
            details={'name': name, 'slug': slug}
        )
        self.name = name
        self.slug = slug


class CategoryInUseException(CategoryException, ConflictException):
    """Raised when deleting a category that products still reference."""

    def __init__(self, category_id: int, product_count: int):
        super().__init__(
            f"Category {category_id} still has {product_count} product(s)",
            details={'category_id': category_id, 'product_count': product_count}
        )
        self.category_id = category_id
        self.product_count = product_count
