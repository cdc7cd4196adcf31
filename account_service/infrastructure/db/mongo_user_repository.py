# Standard library imports
import logging
from typing import Any, Dict, Optional, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, ProfilePatch
from ...domain.constants import UserFields
from ...core.exceptions import ConflictError, NotFoundError, PersistenceError
from .mongo_connection import get_user_collection, get_counter_collection

logger = logging.getLogger(__name__)

PHONE_NUMBER_INDEX_NAME = "phone_number_unique"


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository

    Users are keyed by an integer _id drawn from a sequence document in the
    counters collection. A unique index on phone_number backs up the
    application-level uniqueness check.
    """

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        counter_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.counter_collection = (
            counter_collection if counter_collection is not None else get_counter_collection()
        )

    async def ensure_indexes(self) -> None:
        """Create the unique phone number index if it does not exist"""
        try:
            await self.user_collection.create_index(
                [(UserFields.PHONE_NUMBER, ASCENDING)],
                unique=True,
                name=PHONE_NUMBER_INDEX_NAME,
            )
        except PyMongoError as e:
            raise PersistenceError(f"Error creating user indexes: {str(e)}") from e

    async def create_user(self, user: User) -> int:
        """
        Insert a new user document

        Args:
            user: User domain model without an ID

        Returns:
            Integer ID assigned to the new user

        Raises:
            PersistenceError: On duplicate phone number or any driver failure
        """
        try:
            user_id = await self._next_user_id()
            await self.user_collection.insert_one(self._user_to_document(user, user_id))
        except DuplicateKeyError as e:
            raise PersistenceError("Phone number is already registered") from e
        except PyMongoError as e:
            raise PersistenceError(f"Error creating user: {str(e)}") from e
        return user_id

    async def get_user_by_phone_number(self, phone_number: str) -> User:
        document = await self._find_one({UserFields.PHONE_NUMBER: phone_number}, "phone number")
        if document is None:
            raise NotFoundError("User not found")
        return self._document_to_user(document)

    async def get_user_by_id(self, user_id: int) -> User:
        document = await self._find_one({UserFields.MONGO_ID: user_id}, "ID")
        if document is None:
            raise NotFoundError("User not found")
        return self._document_to_user(document)

    async def check_phone_number_exists(self, phone_number: str) -> bool:
        try:
            count = await self.user_collection.count_documents(
                {UserFields.PHONE_NUMBER: phone_number}, limit=1
            )
        except PyMongoError as e:
            raise PersistenceError(f"Error checking phone number: {str(e)}") from e
        return count > 0

    async def increment_successful_logins(self, user_id: int) -> None:
        try:
            result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: user_id},
                {"$inc": {UserFields.SUCCESSFUL_LOGINS: 1}},
            )
        except PyMongoError as e:
            raise PersistenceError(f"Error incrementing successful logins: {str(e)}") from e
        if result.matched_count == 0:
            raise NotFoundError(f"User with ID {user_id} not found")

    async def update_user_profile(self, user_id: int, patches: Sequence[ProfilePatch]) -> None:
        """
        Apply profile patches as a single $set

        Args:
            user_id: ID of the user to update
            patches: Non-empty list of field patches

        Raises:
            ValueError: If patches is empty
            ConflictError: If the new phone number hits the unique index
            NotFoundError: If no user has this ID
            PersistenceError: On any other driver failure
        """
        if not patches:
            raise ValueError("At least one profile patch is required")

        set_fields: Dict[str, Any] = {patch.field.value: patch.value for patch in patches}
        try:
            result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: user_id},
                {"$set": set_fields},
            )
        except DuplicateKeyError as e:
            raise ConflictError("Phone number already exists") from e
        except PyMongoError as e:
            raise PersistenceError(f"Error updating user profile: {str(e)}") from e
        if result.matched_count == 0:
            raise NotFoundError(f"User with ID {user_id} not found")

    async def _next_user_id(self) -> int:
        counter = await self.counter_collection.find_one_and_update(
            {UserFields.MONGO_ID: UserFields.USERS_SEQUENCE_NAME},
            {"$inc": {UserFields.SEQUENCE: 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter[UserFields.SEQUENCE])

    async def _find_one(self, query: Dict[str, Any], lookup: str) -> Optional[dict]:
        try:
            return await self.user_collection.find_one(query)
        except PyMongoError as e:
            logger.error(f"Error finding user by {lookup}: {e}")
            raise PersistenceError(f"Error finding user by {lookup}: {str(e)}") from e

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model

        Raises:
            PersistenceError: If the stored document is not a valid user
        """
        if not document or UserFields.MONGO_ID not in document:
            raise PersistenceError("Invalid document: missing _id field")

        try:
            return User(
                id=int(document[UserFields.MONGO_ID]),
                phone_number=document.get(UserFields.PHONE_NUMBER, ""),
                full_name=document.get(UserFields.FULL_NAME, ""),
                hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
                successful_logins=int(document.get(UserFields.SUCCESSFUL_LOGINS, 0)),
            )
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid user document {document.get(UserFields.MONGO_ID)!r}: {e}")
            raise PersistenceError(f"Invalid user document: {str(e)}") from e

    def _user_to_document(self, user: User, user_id: int) -> dict:
        return {
            UserFields.MONGO_ID: user_id,
            UserFields.PHONE_NUMBER: user.phone_number,
            UserFields.FULL_NAME: user.full_name,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.SUCCESSFUL_LOGINS: user.successful_logins,
        }
