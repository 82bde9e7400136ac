from typing import List

from trackify.core.errors import NotFound
from trackify.db.categories import CategoryStore
from trackify.models.category import CategoryPublic


class CategoryService:
    def __init__(self, categories: CategoryStore):
        self._categories = categories

    def list_categories(self, user_id: int) -> List[CategoryPublic]:
        # Plain code-point order, so "Zoo" sorts before "apple"
        return sorted(self._categories.list_for_user(user_id), key=lambda c: c.name)

    def create_category(self, user_id: int, name: str) -> CategoryPublic:
        # Duplicate names within one user are allowed
        return self._categories.create(user_id=user_id, name=name)

    def get_category_owned(self, category_id: int, user_id: int) -> CategoryPublic:
        """
        Return the category only if ``user_id`` owns it.

        A missing category and one owned by another user raise the same
        ``NotFound`` so callers cannot probe for other users' ids.
        """
        category = self._categories.get(user_id=user_id, category_id=category_id)
        if category is None:
            raise NotFound("Category not found")
        return category
