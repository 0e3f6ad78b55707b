"""Shared test fixtures for marktally tests."""

from typing import Any, Callable

import pytest

from marktally.model.item import Item, new_item
from marktally.model.item_type import ItemType


@pytest.fixture
def make_item() -> Callable[..., Item]:
    """Build a full Item with defaults, overriding any field by keyword."""
    counter = iter(range(1, 10_000))

    def factory(**fields: Any) -> Item:
        item = new_item(f"notes/test.md#{next(counter)}", ItemType.TASK, "notes")
        item.update(fields)  # type: ignore[typeddict-item]
        return item

    return factory
