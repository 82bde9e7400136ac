import logging

from trackify.core.errors import Conflict, NotFound, Unauthorized
from trackify.core.security import create_access_token, get_password_hash, verify_password
from trackify.db.users import UserStore
from trackify.models.user import AuthResponse, UserInDB, UserPublic

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    def __init__(self, users: UserStore):
        self._users = users

    def register(self, name: str, email: str, password: str) -> AuthResponse:
        if self._users.get_by_email(email):
            logger.info(f"Registration rejected, email already in use: {email}")
            raise Conflict("User already exists")

        user = self._users.create(name=name, email=email, password_hash=get_password_hash(password))
        logger.info(f"Registered user {user.id}")
        return self._issue(user)

    def login(self, email: str, password: str) -> AuthResponse:
        # Unknown email and wrong password must be indistinguishable to the caller
        user = self._users.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for email: {email}")
            raise Unauthorized(INVALID_CREDENTIALS)

        logger.info(f"Login successful for user {user.id}")
        return self._issue(user)

    def profile(self, user_id: int) -> UserPublic:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        return user.public()

    @staticmethod
    def _issue(user: UserInDB) -> AuthResponse:
        access_token = create_access_token(data={"email": user.email, "sub": str(user.id)})
        return AuthResponse(access_token=access_token, user=user.public())
