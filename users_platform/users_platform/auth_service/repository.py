"""
Credential store used by the auth workflow.

``SqlAlchemyUserRepository`` is the production store. ``InMemoryUserRepository``
keeps users in a dict and is interchangeable with it in tests.
"""
from typing import Callable, Dict, Optional, Protocol
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .errors import DuplicateEmailError
from .models import User

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> Optional[User]: ...

    def find_by_id(self, user_id: int) -> Optional[User]: ...

    def create(self, email: str, password: str, full_name: str) -> User: ...

    def update(self, user_id: int, **fields) -> Optional[User]: ...


class SqlAlchemyUserRepository:
    """Opens one session per operation from the given session factory."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> Optional[User]:
        with self._session_factory() as db:
            return db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._session_factory() as db:
            return db.query(User).filter(User.id == user_id).first()

    def create(self, email: str, password: str, full_name: str) -> User:
        with self._session_factory() as db:
            user = User(email=email, password=password, full_name=full_name)
            db.add(user)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise DuplicateEmailError(email) from exc
            db.refresh(user)
            return user

    def update(self, user_id: int, **fields) -> Optional[User]:
        with self._session_factory() as db:
            user = db.query(User).filter(User.id == user_id).first()
            if not user:
                return None
            for name, value in fields.items():
                setattr(user, name, value)
            db.commit()
            db.refresh(user)
            return user


class InMemoryUserRepository:
    def __init__(self):
        self._users: Dict[int, User] = {}
        self._next_id = 1

    def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def create(self, email: str, password: str, full_name: str) -> User:
        if self.find_by_email(email):
            raise DuplicateEmailError(email)
        user = User(id=self._next_id, email=email, password=password, full_name=full_name)
        self._users[user.id] = user
        self._next_id += 1
        return user

    def update(self, user_id: int, **fields) -> Optional[User]:
        user = self._users.get(user_id)
        if not user:
            return None
        for name, value in fields.items():
            setattr(user, name, value)
        return user
