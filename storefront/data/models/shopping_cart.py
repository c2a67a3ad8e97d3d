#storefront/data/models/shopping_cart.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class ShoppingCartModel(Base):
    """One cart line: a user's intent to buy `quantity` of a product."""

    __tablename__ = "shopping_cart"

    cart_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    # no CHECK on quantity, the HTTP schema rejects non-positive values
    quantity = Column(Integer, nullable=False)
    date_added = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    user = relationship("UserModel", back_populates="cart_lines")
    product = relationship("ProductModel")
