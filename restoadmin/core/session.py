from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing_extensions import Annotated

from restoadmin.core.exceptions import SessionParseError
from restoadmin.core.logger import logger

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Session(BaseModel):
    """
    Tarayıcı tarafında tutulan oturum kimliği.
    JSON'a camelCase anahtarlarla yazılır.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: NonEmptyStr
    name: NonEmptyStr
    email: NonEmptyStr
    role: NonEmptyStr

    restaurant_id: Optional[str] = Field(default=None, alias="restaurantId")
    restaurant_name: Optional[str] = Field(default=None, alias="restaurantName")
    restaurant_slug: Optional[str] = Field(default=None, alias="restaurantSlug")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class SessionStore:
    """
    Session'ı tek bir anahtar altında saklar.

    Okunamayan değer ilk okumada silinir; böylece her istekte
    aynı bozuk değer tekrar tekrar parse edilmez.
    """

    def __init__(self, storage: KeyValueStorage, key: str = "user"):
        self.storage = storage
        self.key = key

    def init(self) -> Optional[Session]:
        return self.get()

    def get(self) -> Optional[Session]:
        try:
            raw = self.storage.get_item(self.key)
            if raw is None:
                return None
            return Session.model_validate_json(raw)
        except (SessionParseError, ValidationError):
            logger.warning(f"SESSION INVALID | key={self.key} | cleared")
            self.clear()
            return None

    def set(self, session: Session) -> None:
        self.storage.set_item(self.key, session.to_json())

    def clear(self) -> None:
        self.storage.remove_item(self.key)
