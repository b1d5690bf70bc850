import json
from typing import Callable, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from restoadmin.core.exceptions import ValidationFailed
from restoadmin.schemas.customer_auth import first_error_message

ModelT = TypeVar("ModelT", bound=BaseModel)


def json_body(model: Type[ModelT]) -> Callable:
    """
    Body'yi verilen şemaya göre doğrular.
    Hata olursa FastAPI'nin 422'si yerine ilk hata mesajıyla 400 döner.
    """

    async def dependency(request: Request) -> ModelT:
        raw = await request.body()
        try:
            data = json.loads(raw or b"null")
        except ValueError:
            raise ValidationFailed("Invalid JSON body")

        if not isinstance(data, dict):
            raise ValidationFailed("Request body must be a JSON object")

        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise ValidationFailed(first_error_message(exc))

    return dependency
