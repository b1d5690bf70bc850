from typing import Dict, List, Optional, Tuple

from fastapi import Request, Response

from restoadmin.core.config import settings
from restoadmin.core.security import sign_value, unsign_value
from restoadmin.core.session import SessionStore


class MemoryStorage:
    """Process içi key-value storage (testler ve tek process kullanım)."""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class CookieStorage:
    """
    Bir HTTP isteğine bağlı storage.

    Okuma gelen cookie'lerden yapılır. Yazma ve silme işlemleri
    kuyruğa alınır ve apply_to() ile giden response'a uygulanır.
    Kuyruktaki son değer aynı istek içindeki okumalarda görünür.
    """

    def __init__(self, request: Request):
        self._cookies = dict(request.cookies)
        self._pending: List[Tuple[str, Optional[str]]] = []

    def get_item(self, key: str) -> Optional[str]:
        token = self._cookies.get(key)
        if token is None:
            return None
        # imza geçersizse SessionParseError fırlatır
        return unsign_value(token)

    def set_item(self, key: str, value: str) -> None:
        token = sign_value(value)
        self._cookies[key] = token
        self._pending.append((key, token))

    def remove_item(self, key: str) -> None:
        self._cookies.pop(key, None)
        self._pending.append((key, None))

    def apply_to(self, response: Response) -> Response:
        for key, token in self._pending:
            if token is None:
                response.delete_cookie(key)
            else:
                response.set_cookie(
                    key=key,
                    value=token,
                    httponly=True,
                    samesite="lax",
                    secure=settings.SESSION_COOKIE_SECURE
                )
        self._pending.clear()
        return response


class CookieSessionStore(SessionStore):
    """CookieStorage üzerinde çalışan store; bekleyen cookie yazımlarını response'a taşır."""

    storage: CookieStorage

    def __init__(self, request: Request, key: str = "user"):
        super().__init__(CookieStorage(request), key=key)

    def apply_to(self, response: Response) -> Response:
        return self.storage.apply_to(response)
