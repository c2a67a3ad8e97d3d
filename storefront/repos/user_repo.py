from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel


class UserRepo:
    """Credential store: user rows keyed by id, looked up by email."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def find_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def save(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        self.db.refresh(user)
        return user

    def delete_by_id(self, user_id: int) -> None:
        user = self.find_by_id(user_id)
        if user:
            self.db.delete(user)
            self.db.flush()
