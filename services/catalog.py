"""Catalogue des produits et algorithme de listage.

Le listage produit deux formes de lignes :

* :class:`ProductRow` - un produit avec la liste complète de ses catégories
  (tri par produit) ;
* :class:`CategoryRow` - un produit avec au plus une catégorie (tri par
  catégorie). Un produit rangé dans N catégories retenues donne N lignes.

Le filtre par catégories a trois états : ``None`` (tous les produits), liste
vide (seulement les produits sans catégorie), liste non vide (les produits
qui possèdent au moins une des catégories listées).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from models import Category, Product, ProductCategory
from schemas import ProductResponse, SortOrder
from services.errors import ErrorKind, ServiceError

logger = logging.getLogger(__name__)


@dataclass
class ProductRow:
    """Produit accompagné de tous ses identifiants de catégorie."""

    product: Product
    categories: List[int] = field(default_factory=list)


@dataclass
class CategoryRow:
    """Produit accompagné d'une seule catégorie, ou d'aucune."""

    product: Product
    category: Optional[Category] = None


def _categories_by_product(links: Iterable[ProductCategory]) -> Dict[int, List[int]]:
    categories: Dict[int, List[int]] = {}
    for link in links:
        categories.setdefault(link.product.id, []).append(link.category.id)
    for ids in categories.values():
        ids.sort()
    return categories


def rows_by_product(
    links: Sequence[ProductCategory],
    uncategorized: Sequence[Product],
    category_ids: Optional[Sequence[int]] = None,
) -> List[ProductRow]:
    """Chaque produit retenu une seule fois, trié par nom.

    Args:
        links: Toutes les paires (produit, catégorie).
        uncategorized: Tous les produits sans catégorie.
        category_ids: Filtre par catégories.
    """
    categories = _categories_by_product(links)

    if category_ids is not None and not category_ids:
        selected = list(uncategorized)
    else:
        wanted = None if category_ids is None else set(category_ids)
        selected = list(uncategorized) if wanted is None else []
        seen = set()
        for link in links:
            product = link.product
            if product.id in seen:
                continue
            if wanted is None or link.category.id in wanted:
                seen.add(product.id)
                selected.append(product)

    rows = [ProductRow(product, categories.get(product.id, [])) for product in selected]
    rows.sort(key=lambda row: (row.product.name, row.product.id))
    return rows


def rows_by_category(
    links: Sequence[ProductCategory],
    uncategorized: Sequence[Product],
    category_ids: Optional[Sequence[int]] = None,
) -> List[CategoryRow]:
    """Une ligne par paire (produit, catégorie) retenue.

    Les produits sans catégorie (filtre absent ou vide) viennent en tête,
    triés par nom ; les autres lignes sont triées par nom de catégorie puis
    par nom de produit.
    """
    rows: List[CategoryRow] = []

    if not category_ids:
        rows.extend(sorted(
            (CategoryRow(product) for product in uncategorized),
            key=lambda row: (row.product.name, row.product.id),
        ))

    if category_ids is None:
        picked = list(links)
    else:
        wanted = set(category_ids)
        picked = [link for link in links if link.category.id in wanted]

    rows.extend(sorted(
        (CategoryRow(link.product, link.category) for link in picked),
        key=lambda row: (row.category.name, row.product.name, row.product.id),
    ))
    return rows


def product_response(product: Product, categories: Optional[List[int]]) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        price=product.price,
        count=product.count,
        categories=categories,
    )


class CatalogService:
    """Service des produits : administration et listage.

    Args:
        guard: Garde d'autorisation.
        product_dao: Accès aux produits et à leurs catégories.
        category_dao: Accès aux catégories.
    """

    def __init__(self, guard, product_dao, category_dao):
        self.guard = guard
        self.products = product_dao
        self.categories = category_dao

    def add(
        self,
        token: Optional[str],
        name: str,
        price: int,
        count: Optional[int] = None,
        categories: Optional[Sequence[int]] = None,
    ) -> ProductResponse:
        self.guard.require_admin(token)

        new_categories = self._resolve_categories(categories) if categories is not None else []

        product = Product(name=name, price=price, count=count if count is not None else 0)
        self.products.insert(product)
        if new_categories:
            self.products.insert_categories(
                [ProductCategory(product=product, category=category) for category in new_categories]
            )

        logger.info(f"Produit {product.id} ajouté")
        return self._response(product)

    def edit(
        self,
        token: Optional[str],
        product_id: int,
        name: Optional[str] = None,
        price: Optional[int] = None,
        count: Optional[int] = None,
        categories: Optional[Sequence[int]] = None,
    ) -> ProductResponse:
        """Modifie un produit.

        Quand ``categories`` est fourni, l'ancien ensemble est remplacé en
        entier, mais seulement après validation de chaque nouvel identifiant.
        """
        self.guard.require_admin(token)
        product = self._get(product_id)

        new_categories = None
        if categories is not None:
            new_categories = self._resolve_categories(categories)

        if name is not None:
            product.name = name
        if price is not None:
            product.price = price
        if count is not None:
            product.count = count

        if new_categories is not None:
            for link in self.products.get_categories(product.id):
                self.products.delete_category(link)
            if new_categories:
                self.products.insert_categories(
                    [ProductCategory(product=product, category=category) for category in new_categories]
                )

        self.products.update(product)
        return self._response(product)

    def delete(self, token: Optional[str], product_id: int) -> None:
        self.guard.require_admin(token)
        product = self._get(product_id)

        for link in self.products.get_categories(product.id):
            self.products.delete_category(link)
        self.products.delete(product)
        logger.info(f"Produit {product_id} supprimé")

    def get(self, token: Optional[str], product_id: int) -> ProductResponse:
        self.guard.resolve(token)
        return self._response(self._get(product_id))

    def list(
        self,
        token: Optional[str],
        categories: Optional[Sequence[int]] = None,
        order: Optional[SortOrder] = None,
    ) -> List[ProductResponse]:
        self.guard.resolve(token)

        links = self.products.get_all_with_category()
        uncategorized = self.products.get_all_without_category()

        if order is None or order == SortOrder.PRODUCT:
            return [
                product_response(row.product, row.categories)
                for row in rows_by_product(links, uncategorized, categories)
            ]

        return [
            product_response(row.product, [row.category.id] if row.category is not None else None)
            for row in rows_by_category(links, uncategorized, categories)
        ]

    def _get(self, product_id: int) -> Product:
        product = self.products.get(product_id)
        if product is None:
            raise ServiceError(ErrorKind.PRODUCT_NOT_FOUND, "id")
        return product

    def _resolve_categories(self, category_ids: Sequence[int]) -> List[Category]:
        """Catégories existantes, sans doublons, dans l'ordre de la requête."""
        result = []
        for category_id in dict.fromkeys(category_ids):
            category = self.categories.get(category_id)
            if category is None:
                raise ServiceError(ErrorKind.CATEGORY_NOT_FOUND, "categories")
            result.append(category)
        return result

    def _response(self, product: Product) -> ProductResponse:
        links = self.products.get_categories(product.id)
        return product_response(product, [link.category_id for link in links])
