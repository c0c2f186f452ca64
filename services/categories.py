"""Gestion de l'arbre des catégories (un seul niveau de sous-catégories)."""

from typing import List, Optional

from models import Category
from schemas import CategoryResponse
from services.errors import ErrorKind, ServiceError


def category_response(category: Category) -> CategoryResponse:
    parent = category.parent
    return CategoryResponse(
        id=category.id,
        name=category.name,
        parent_id=parent.id if parent else None,
        parent_name=parent.name if parent else None,
    )


class CategoryService:
    """Service de gestion des catégories, réservé aux administrateurs."""

    def __init__(self, guard, category_dao):
        self.guard = guard
        self.categories = category_dao

    def add(self, token: Optional[str], name: str, parent_id: Optional[int] = None) -> CategoryResponse:
        self.guard.require_admin(token)

        if self.categories.exists(name):
            raise ServiceError(ErrorKind.SAME_CATEGORY_NAME, "name")

        parent = None
        if parent_id is not None:
            parent = self._get_parent(parent_id)

        category = Category(name=name, parent=parent)
        self.categories.insert(category)
        return category_response(category)

    def get(self, token: Optional[str], category_id: int) -> CategoryResponse:
        self.guard.require_admin(token)
        return category_response(self._get(category_id))

    def edit(
        self,
        token: Optional[str],
        category_id: int,
        name: Optional[str] = None,
        parent_id: Optional[int] = None,
    ) -> CategoryResponse:
        """Renomme et/ou déplace une catégorie.

        Raises:
            ServiceError: CategoryNotFound, EditCategoryEmpty, SameCategoryName,
                CategoryToSubcategory ou SecondLevelSubcategory.
        """
        self.guard.require_admin(token)
        category = self._get(category_id)

        if name is None and parent_id is None:
            raise ServiceError(ErrorKind.EDIT_CATEGORY_EMPTY)

        if name is not None and name != category.name and self.categories.exists(name):
            raise ServiceError(ErrorKind.SAME_CATEGORY_NAME, "name")

        parent = None
        if parent_id is not None:
            parent = self._get_parent(parent_id)
            # Une catégorie racine reste racine
            if parent.id == category.id or category.parent_id is None:
                raise ServiceError(ErrorKind.CATEGORY_TO_SUBCATEGORY, "parentId")

        if name is not None:
            category.name = name
        if parent is not None:
            category.parent = parent

        self.categories.update(category)
        return category_response(category)

    def delete(self, token: Optional[str], category_id: int) -> None:
        self.guard.require_admin(token)
        self.categories.delete(self._get(category_id))

    def list(self, token: Optional[str]) -> List[CategoryResponse]:
        """Toutes les catégories : les racines par nom, chacune suivie de ses sous-catégories par nom."""
        self.guard.require_admin(token)

        categories = self.categories.get_all()
        children = {}
        for category in categories:
            if category.parent_id is not None:
                children.setdefault(category.parent_id, []).append(category)

        result = []
        for category in categories:
            if category.parent_id is None:
                result.append(category_response(category))
                result.extend(category_response(child) for child in children.get(category.id, []))
        return result

    def _get(self, category_id: int) -> Category:
        category = self.categories.get(category_id)
        if category is None:
            raise ServiceError(ErrorKind.CATEGORY_NOT_FOUND, "id")
        return category

    def _get_parent(self, parent_id: int) -> Category:
        parent = self.categories.get(parent_id)
        if parent is None:
            raise ServiceError(ErrorKind.CATEGORY_NOT_FOUND, "parentId")
        if parent.parent_id is not None:
            raise ServiceError(ErrorKind.SECOND_LEVEL_SUBCATEGORY, "parentId")
        return parent
