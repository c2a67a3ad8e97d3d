# storefront/data/unit_of_work.py
from sqlalchemy.orm import Session

from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.repos.user_repo import UserRepo


class UnitOfWork:
    """
    One transaction against the store.

    Used as a context manager around a single service operation. Work is
    committed only through commit(); leaving the block without it (early
    return of an error result, or an exception) rolls everything back.
    The session itself is owned by the caller and is not closed here.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepo(db)
        self.products = ProductRepo(db)
        self.carts = CartRepo(db)
        self._committed = False

    def __enter__(self) -> "UnitOfWork":
        self._committed = False
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self._committed:
            self.rollback()
        return False

    def commit(self):
        self.db.commit()
        self._committed = True

    def rollback(self):
        self.db.rollback()
