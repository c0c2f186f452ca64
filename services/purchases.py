"""Dépôt, achats et panier des clients."""

import logging
from typing import List, Optional, Sequence

from models import Account, BasketItem, Product
from schemas import AccountResponse, BasketItemResponse, BasketPurchaseResponse, PurchaseRequest
from services.accounts import account_response
from services.errors import ErrorKind, ServiceError

logger = logging.getLogger(__name__)


def basket_item_response(product: Product, count: int) -> BasketItemResponse:
    return BasketItemResponse(id=product.id, name=product.name, price=product.price, count=count)


class PurchaseService:
    """Opérations réservées aux clients.

    Args:
        guard: Garde d'autorisation.
        account_dao: Accès aux comptes (dépôt).
        product_dao: Accès aux produits (stock).
        basket_dao: Accès aux paniers.
    """

    def __init__(self, guard, account_dao, product_dao, basket_dao):
        self.guard = guard
        self.accounts = account_dao
        self.products = product_dao
        self.baskets = basket_dao

    def put_deposit(self, token: Optional[str], amount: int) -> AccountResponse:
        client = self.guard.require_client(token)
        client.deposit += amount
        self.accounts.update(client)
        return account_response(client)

    def get_deposit(self, token: Optional[str]) -> AccountResponse:
        return account_response(self.guard.require_client(token))

    def buy_product(
        self,
        token: Optional[str],
        product_id: int,
        name: str,
        price: int,
        count: Optional[int] = None,
    ) -> BasketItemResponse:
        """Achat direct d'un produit, 1 exemplaire par défaut."""
        client = self.guard.require_client(token)
        count = count if count is not None else 1

        product = self._get_matching(product_id, name, price)
        if product.count < count:
            raise ServiceError(ErrorKind.NOT_ENOUGH_PRODUCT, "count")
        self._check_money(client, product.price * count)

        product.count -= count
        client.deposit -= product.price * count
        self.baskets.commit()

        logger.info(f"Client {client.id} : achat de {count} x produit {product.id}")
        return basket_item_response(product, count)

    def add_to_basket(
        self,
        token: Optional[str],
        product_id: int,
        name: str,
        price: int,
        count: Optional[int] = None,
    ) -> List[BasketItemResponse]:
        client = self.guard.require_client(token)
        count = count if count is not None else 1

        product = self._get_matching(product_id, name, price)
        item = self.baskets.get(client.id, product.id)
        if item is None:
            self.baskets.insert(BasketItem(account_id=client.id, product_id=product.id, count=count))
        else:
            item.count += count
            self.baskets.update(item)

        return self._basket(client)

    def edit_basket_count(
        self,
        token: Optional[str],
        product_id: int,
        name: str,
        price: int,
        count: int,
    ) -> List[BasketItemResponse]:
        client = self.guard.require_client(token)

        item = self._get_item(client, product_id)
        self._check_info(item.product, name, price)
        item.count = count
        self.baskets.update(item)

        return self._basket(client)

    def delete_from_basket(self, token: Optional[str], product_id: int) -> None:
        client = self.guard.require_client(token)
        self.baskets.delete(self._get_item(client, product_id))

    def get_basket(self, token: Optional[str]) -> List[BasketItemResponse]:
        return self._basket(self.guard.require_client(token))

    def buy_basket(self, token: Optional[str], items: Sequence[PurchaseRequest]) -> BasketPurchaseResponse:
        """Achète les lignes demandées du panier.

        Une ligne absente du panier, périmée (nom ou prix) ou dont le stock
        est insuffisant n'est pas achetée et reste dans le panier. Si le total
        des lignes achetables dépasse le dépôt, rien n'est acheté.
        """
        client = self.guard.require_client(token)

        purchases = []
        seen = set()
        for request in items:
            item = self.baskets.get(client.id, request.id)
            if item is None or item.id in seen:
                continue
            seen.add(item.id)
            product = item.product
            if product.name != request.name or product.price != request.price:
                continue
            count = min(request.count, item.count) if request.count is not None else item.count
            if product.count < count:
                continue
            purchases.append((item, count))

        total = sum(item.product.price * count for item, count in purchases)
        self._check_money(client, total)

        bought = []
        for item, count in purchases:
            item.product.count -= count
            bought.append(basket_item_response(item.product, count))
            if count == item.count:
                self.baskets.discard(item)
            else:
                item.count -= count
        client.deposit -= total
        self.baskets.commit()

        logger.info(f"Client {client.id} : achat du panier, {len(bought)} ligne(s) pour {total}")
        return BasketPurchaseResponse(bought=bought, remaining=self._basket(client))

    def _get_matching(self, product_id: int, name: str, price: int) -> Product:
        product = self.products.get(product_id)
        if product is None:
            raise ServiceError(ErrorKind.PRODUCT_NOT_FOUND, "id")
        self._check_info(product, name, price)
        return product

    def _check_info(self, product: Product, name: str, price: int) -> None:
        if product.name != name:
            raise ServiceError(ErrorKind.WRONG_PRODUCT_INFO, "name")
        if product.price != price:
            raise ServiceError(ErrorKind.WRONG_PRODUCT_INFO, "price")

    def _check_money(self, client: Account, amount: int) -> None:
        if client.deposit < amount:
            raise ServiceError(ErrorKind.NOT_ENOUGH_MONEY, "deposit")

    def _get_item(self, client: Account, product_id: int) -> BasketItem:
        item = self.baskets.get(client.id, product_id)
        if item is None:
            raise ServiceError(ErrorKind.PRODUCT_NOT_FOUND, "id")
        return item

    def _basket(self, client: Account) -> List[BasketItemResponse]:
        return [basket_item_response(item.product, item.count) for item in self.baskets.get_all(client.id)]
