# storefront/repos/cart_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.shopping_cart import ShoppingCartModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_line(self, line: ShoppingCartModel) -> ShoppingCartModel:
        self.db.add(line)
        self.db.flush()
        self.db.refresh(line)
        return line

    def get_lines_for_user(self, user_id: int) -> list[ShoppingCartModel]:
        return list(
            self.db.execute(
                select(ShoppingCartModel)
                .where(ShoppingCartModel.user_id == user_id)
                .order_by(ShoppingCartModel.cart_id)
            ).scalars().all()
        )
