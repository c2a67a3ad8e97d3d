from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Dict

from storefront.data.models.shopping_cart import ShoppingCartModel
from storefront.data.unit_of_work import UnitOfWork
from storefront.domain.results import AccountErrorKind, Ok, Result, err
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Cart lines for a user.
    command (add_to_cart) writes a new line, query (list_cart, get_cart) only reads
    """

    def __init__(self, uow_factory: Callable[[], UnitOfWork]):
        self.uow_factory = uow_factory

    #commands
    def add_to_cart(self, user_id: int, product_id: int, quantity: int) -> Result[ShoppingCartModel]:
        with self.uow_factory() as uow:
            if uow.users.find_by_id(user_id) is None:
                return err(AccountErrorKind.ACCOUNT_NOT_FOUND, "User not found")

            if uow.products.get_product(product_id) is None:
                return err(AccountErrorKind.PRODUCT_NOT_FOUND, "Product not found")

            line = uow.carts.add_line(
                ShoppingCartModel(
                    user_id=user_id,
                    product_id=product_id,
                    quantity=quantity,
                    date_added=datetime.now(timezone.utc),
                )
            )
            uow.commit()

        logger.info(f"Added product {product_id} x{quantity} to cart of user {user_id} (line {line.cart_id})")
        return Ok(line)

    #query
    def list_cart(self, user_id: int) -> list[ShoppingCartModel]:
        with self.uow_factory() as uow:
            return uow.carts.get_lines_for_user(user_id)

    def get_cart(self, user_id: int) -> Dict[str, Any]:
        with self.uow_factory() as uow:
            lines = uow.carts.get_lines_for_user(user_id)
            total = sum((line.product.price * line.quantity for line in lines), Decimal("0.00"))

            #dict turned into json by the router
            return {
                "user_id": user_id,
                "items": [
                    {
                        "cart_id": line.cart_id,
                        "user_id": line.user_id,
                        "product_id": line.product_id,
                        "quantity": line.quantity,
                        "date_added": line.date_added,
                    }
                    for line in lines
                ],
                "total": total,
            }
