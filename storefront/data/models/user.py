from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # unique index backs the duplicate check done by AccountService.register
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(100), nullable=False)
    password_hash = Column(Text, nullable=False)
    signup_date = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    role = Column(String(32), nullable=False)

    # deleting a user leaves cart rows alone, the foreign key decides what happens
    cart_lines = relationship("ShoppingCartModel", back_populates="user", passive_deletes="all")
