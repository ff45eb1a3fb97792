import re

import pytest

from utils.pagination import build_page, get_offset
from utils.slug import slugify, product_slug, to_base36


class TestSlugify:

    @pytest.mark.parametrize("name,expected", [
        ("Electronics", "electronics"),
        ("  Gaming Laptops & Accessories ", "gaming-laptops-accessories"),
        ("snake_case name", "snake-case-name"),
        ("a -- b", "a-b"),
        ("Ünïcode Wörds", "ünïcode-wörds"),
    ])
    def test_slugify(self, name, expected):
        assert slugify(name) == expected

    def test_base36(self):
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"
        with pytest.raises(ValueError):
            to_base36(-1)

    def test_product_slug_has_unique_suffix(self):
        slug = product_slug("Desk Lamp")

        assert re.fullmatch(r"desk-lamp-[0-9a-z]+", slug)
        assert len({product_slug("Desk Lamp") for _ in range(5)}) == 5


class TestPagination:

    def test_offset(self):
        assert get_offset(1, 10) == 0
        assert get_offset(3, 10) == 20

    @pytest.mark.parametrize("total,limit,expected_pages", [
        (0, 10, 0),
        (10, 10, 1),
        (11, 10, 2),
        (1, 1, 1),
    ])
    def test_total_pages(self, total, limit, expected_pages):
        page = build_page([], total, 1, limit)

        assert page.meta.total_pages == expected_pages
        assert page.meta.total == total
