from typing import Dict, List, Optional, Union
from pydantic import ValidationError
from ..store import RecordStore, StoreUnavailable
from ...core.errors import UserError, UserErrorKind
from ...schemas.user import User
from ...utils.validators import is_email_valid
import logging

logger = logging.getLogger(__name__)

class UserRepository:
    def __init__(self, store: RecordStore, update_requires_existing: bool = True):
        self.store = store
        self.update_requires_existing = update_requires_existing

    async def get_by_email(self, email: str) -> Optional[User]:
        if not email:
            raise UserError(UserErrorKind.INVALID_INPUT)
        try:
            item = self.store.get_item({'email': email})
        except StoreUnavailable as e:
            raise UserError(UserErrorKind.FETCH_FAILED) from e

        if item is None:
            return None
        return self._decode(item)

    async def fetch_user(self, email: str) -> User:
        """Fetch one user. A missing record comes back as an empty User, not an error."""
        user = await self.get_by_email(email)
        return user if user is not None else User()

    async def fetch_users(self) -> List[User]:
        try:
            items = self.store.scan()
        except StoreUnavailable as e:
            raise UserError(UserErrorKind.FETCH_FAILED) from e
        return [self._decode(item) for item in items]

    async def create_user(self, raw_body: Union[str, bytes]) -> User:
        user = self._parse(raw_body)

        if not is_email_valid(user.email):
            raise UserError(UserErrorKind.INVALID_EMAIL)

        if await self._exists(user.email):
            raise UserError(UserErrorKind.ALREADY_EXISTS)

        self._save(user)
        logger.info(f"Created user {user.email}")
        return user

    async def update_user(self, raw_body: Union[str, bytes]) -> User:
        """Replace a stored user with the body's contents.

        With ``update_requires_existing`` (the default) the target must already be
        stored. Without it, the old precondition applies: the update is rejected
        when the user *does* exist, so only unknown emails can be written.
        """
        user = self._parse(raw_body)

        if self.update_requires_existing:
            # A failed lookup is reported as such, not as a missing user
            current = await self.get_by_email(user.email)
            if current is None or current.is_empty:
                raise UserError(UserErrorKind.DOES_NOT_EXIST)
        elif await self._exists(user.email):
            raise UserError(UserErrorKind.ALREADY_EXISTS)

        self._save(user)
        logger.info(f"Updated user {user.email}")
        return user

    async def delete_user(self, email: str) -> None:
        if not email:
            raise UserError(UserErrorKind.INVALID_INPUT)
        try:
            self.store.delete_item({'email': email})
        except StoreUnavailable as e:
            raise UserError(UserErrorKind.DELETE_FAILED) from e
        logger.info(f"Deleted user {email}")

    async def _exists(self, email: str) -> bool:
        # Probe failures count as "not found"
        try:
            current = await self.get_by_email(email)
        except UserError as e:
            logger.warning(f"Existence check for {email!r} failed: {e.message}")
            return False
        return current is not None and not current.is_empty

    def _save(self, user: User) -> None:
        try:
            item = user.to_item()
        except (TypeError, ValueError) as e:
            raise UserError(UserErrorKind.ENCODE_FAILED) from e
        try:
            self.store.put_item(item)
        except StoreUnavailable as e:
            raise UserError(UserErrorKind.WRITE_FAILED) from e

    @staticmethod
    def _parse(raw_body: Union[str, bytes]) -> User:
        try:
            return User.model_validate_json(raw_body or b"")
        except ValidationError as e:
            raise UserError(UserErrorKind.INVALID_INPUT) from e

    @staticmethod
    def _decode(item: Dict) -> User:
        try:
            return User.model_validate(item)
        except ValidationError as e:
            raise UserError(UserErrorKind.DECODE_FAILED) from e
