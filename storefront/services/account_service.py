# storefront/services/account_service.py
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Sequence

from sqlalchemy.exc import IntegrityError

from storefront.data.models.user import UserModel
from storefront.data.unit_of_work import UnitOfWork
from storefront.domain.patches import InvalidField, PatchOp, SetName, SetPassword, parse_patch
from storefront.domain.results import AccountErrorKind, Ok, Result, err
from storefront.domain import roles
from storefront.security.authenticator import Authenticator
from storefront.security.passwords import PasswordHasher
from storefront.security.tokens import AccessToken, TokenIssuer
from storefront.services.notification_service import NotificationService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class AccountService:
    """
    Account use cases: login, registration, lookup, partial update, deletion.

    Every command runs in its own UnitOfWork and only commits on success.
    Business failures come back as Err results, store faults propagate.
    """

    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        hasher: PasswordHasher,
        authenticator: Authenticator,
        token_issuer: TokenIssuer,
        notification_service: NotificationService | None = None,
        default_role: roles.UserRole | None = None,
    ):
        self.uow_factory = uow_factory
        self.hasher = hasher
        self.authenticator = authenticator
        self.token_issuer = token_issuer
        self.notification_service = notification_service or NotificationService()
        self.default_role = default_role or roles.default_role()

    def login(self, email: str, raw_password: str) -> Result[AccessToken]:
        logger.info(f"Login attempt for {email}")
        try:
            identity = self.authenticator.verify(email, raw_password)
        except Exception:
            logger.error(f"Authentication failed for {email}", exc_info=True)
            return err(AccountErrorKind.AUTHENTICATION_FAILED, "Invalid email or password")

        token = self.token_issuer.issue(identity)
        logger.info(f"Authentication successful for {email}")
        return Ok(token)

    def register(
        self,
        email: str,
        name: str,
        raw_password: str,
        confirm_password: str,
    ) -> Result[UserModel]:
        with self.uow_factory() as uow:
            if uow.users.find_by_email(email) is not None:
                return err(AccountErrorKind.DUPLICATE_ACCOUNT, "Email is already registered")

            if raw_password != confirm_password:
                return err(AccountErrorKind.PASSWORD_MISMATCH, "Passwords do not match")

            user = UserModel(
                email=email,
                name=name,
                password_hash=self.hasher.hash(raw_password),
                signup_date=datetime.now(timezone.utc),
                role=self.default_role.value,
            )
            try:
                user = uow.users.save(user)
                uow.commit()
            except IntegrityError:
                uow.rollback()
                if uow.users.find_by_email(email) is None:
                    raise
                # lost the race against a concurrent registration
                logger.warning(f"Unique constraint hit while registering {email}")
                return err(AccountErrorKind.DUPLICATE_ACCOUNT, "Email is already registered")

        logger.info(f"Registered user {user.id} ({email})")

        try:
            self.notification_service.send_welcome_notification(user.id, user.email)
        except Exception as e:
            logger.warning(f"Failed to dispatch welcome notification for user {user.id}: {e}")

        return Ok(user)

    def find_by_id(self, user_id: int) -> UserModel | None:
        with self.uow_factory() as uow:
            return uow.users.find_by_id(user_id)

    def patch_user(
        self,
        user_id: int,
        updates: Mapping[str, Any] | Sequence[PatchOp],
    ) -> Result[UserModel]:
        if isinstance(updates, Mapping):
            try:
                ops = parse_patch(updates)
            except InvalidField as e:
                logger.info(f"Rejected patch for user {user_id}: {e}")
                return err(AccountErrorKind.INVALID_FIELD, str(e))
        else:
            ops = list(updates)

        with self.uow_factory() as uow:
            user = uow.users.find_by_id(user_id)
            if user is None:
                return err(AccountErrorKind.ACCOUNT_NOT_FOUND, "User not found")

            for op in ops:
                if isinstance(op, SetPassword):
                    user.password_hash = self.hasher.hash(op.value)
                elif isinstance(op, SetName):
                    user.name = op.value
                else:
                    return err(AccountErrorKind.INVALID_FIELD, f"Unsupported patch operation: {op!r}")

            user = uow.users.save(user)
            uow.commit()

        logger.info(f"Patched user {user_id}: {[type(op).__name__ for op in ops]}")
        return Ok(user)

    def delete_user(self, user_id: int) -> Result[None]:
        with self.uow_factory() as uow:
            if uow.users.find_by_id(user_id) is None:
                return err(AccountErrorKind.ACCOUNT_NOT_FOUND, "User not found")

            uow.users.delete_by_id(user_id)
            uow.commit()

        logger.info(f"Deleted user {user_id}")
        return Ok(None)
