"""User CRUD helpers"""

from typing import Optional
from sqlalchemy.orm import Session

from tunerec.crud.base import BaseCRUD
from tunerec.models.user import User
from tunerec.schemas import UserCreate, UserUpdate


class UserCRUD(BaseCRUD[User, UserCreate, UserUpdate]):
    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        """Return a user by email address."""
        return db.query(User).filter(User.email == email).first()


user_crud = UserCRUD(User)
