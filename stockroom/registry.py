"""Registry mapping category names to item factories."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from stockroom.items import InventoryItem

ItemFactory = Callable[[int, str, float, int, Sequence[str]], InventoryItem]


class CategoryNotFoundError(LookupError):
    """Raised when no factory is registered for a category."""


class CategoryRegistry:
    """Creates inventory items by category name."""

    _instance: CategoryRegistry | None = None

    def __init__(self) -> None:
        self._factories: dict[str, ItemFactory] = {}

    @classmethod
    def get_instance(cls) -> CategoryRegistry:
        """Return the process-wide registry."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_category(self, category_name: str, factory: ItemFactory) -> None:
        self._factories[category_name] = factory

    def create_item(
        self,
        category_name: str,
        item_id: int,
        name: str,
        price: float,
        stock_quantity: int,
        extra_fields: Sequence[str],
    ) -> InventoryItem:
        try:
            factory = self._factories[category_name]
        except KeyError:
            raise CategoryNotFoundError(f"Category not found : {category_name}") from None
        return factory(item_id, name, price, stock_quantity, extra_fields)