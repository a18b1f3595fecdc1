from typing import List, Tuple

from todo.constants.messages import RepositoryErrors
from todo.dto.user_dto import CreateOrUpdateUserDTO, UserDTO
from todo.exceptions.repository_exceptions import STORE_ERRORS
from todo.exceptions.user_exceptions import UserOperationException
from todo.models.user import UserModel
from todo.repositories.user_repository import UserRepository


class UserService:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def get_all_users(self) -> List[UserDTO]:
        try:
            users = self.user_repository.get_all()
        except STORE_ERRORS as e:
            raise UserOperationException(RepositoryErrors.FETCH_USER_FAILED) from e
        return [self.prepare_user_dto(user) for user in users]

    def get_user_by_email(self, email: str) -> UserDTO | None:
        """
        Returns None when no user has this email; the caller responds with null rather than 404.
        """
        try:
            user = self.user_repository.get_by_email(email)
        except STORE_ERRORS as e:
            raise UserOperationException(RepositoryErrors.FETCH_USER_FAILED) from e
        return self.prepare_user_dto(user) if user else None

    def create_or_update_user(self, dto: CreateOrUpdateUserDTO) -> Tuple[UserDTO, bool]:
        try:
            user, created = self.user_repository.create_or_update(dto)
        except STORE_ERRORS as e:
            raise UserOperationException(RepositoryErrors.USER_CREATE_UPDATE_FAILED) from e
        return self.prepare_user_dto(user), created

    @staticmethod
    def prepare_user_dto(user: UserModel) -> UserDTO:
        return UserDTO(id=str(user.id), **user.model_dump(exclude={"id"}))
