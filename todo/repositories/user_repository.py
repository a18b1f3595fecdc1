from datetime import datetime, timezone
from typing import List, Tuple

from todo.constants.messages import RepositoryErrors
from todo.dto.user_dto import CreateOrUpdateUserDTO
from todo.models.user import UserModel
from todo.repositories.common.mongo_repository import MongoRepository


class UserRepository(MongoRepository):
    collection_name = UserModel.collection_name

    def get_all(self) -> List[UserModel]:
        return [UserModel(**doc) for doc in self.get_collection().find()]

    def get_by_email(self, email: str) -> UserModel | None:
        doc = self.get_collection().find_one({"email": email})
        return UserModel(**doc) if doc else None

    def create_or_update(self, user_data: CreateOrUpdateUserDTO) -> Tuple[UserModel, bool]:
        """
        Upsert a user keyed on email in a single atomic write.

        An existing user gets name and photoURL overwritten and keeps its id and createdAt.
        A new user is inserted with createdAt set to now.

        Returns:
            Tuple[UserModel, bool]: The stored user and whether it was newly created
        """
        collection = self.get_collection()
        now = datetime.now(timezone.utc)

        result = collection.update_one(
            {"email": user_data.email},
            {
                "$set": {
                    "name": user_data.name,
                    "photoURL": user_data.photoURL,
                },
                "$setOnInsert": {
                    "createdAt": now,
                },
            },
            upsert=True,
        )

        doc = collection.find_one({"email": user_data.email})
        if not doc:
            raise ValueError(RepositoryErrors.USER_NOT_FOUND_AFTER_UPSERT.format(user_data.email))
        return UserModel(**doc), result.upserted_id is not None
