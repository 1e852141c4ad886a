"""
Request dependencies shared by the endpoint modules.

Bodies are read with :func:`json_body` instead of declaring the model
as a FastAPI body parameter.  FastAPI only decodes JSON when the
``Content-Type`` says so, while browsers posting without a preflight
send ``text/plain``; here the raw body is always parsed as JSON.
Because it is an ordinary dependency, it also runs after any
dependency declared before it, so ``require_admin`` is checked before
the body is read.
"""

import json
import logging
from typing import Callable, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel

from kmca_api.app.core.errors import MalformedRequest

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def json_body(model: Type[ModelT]) -> Callable:
    """Dependency factory returning the request body parsed into ``model``.

    An empty body is read as ``{}``.  A JSON value that is not an object
    (``[]``, ``null``, a string) carries no fields either and is read
    as ``{}``, so required-field checks answer 400.  Text that is not
    JSON raises :class:`MalformedRequest`.
    """

    async def _dependency(request: Request) -> ModelT:
        raw = await request.body()
        if not raw.strip():
            return model()
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            logger.error("[api] malformed request body on %s %s: %s", request.method, request.url.path, exc)
            raise MalformedRequest() from exc
        if not isinstance(data, dict):
            data = {}
        return model.model_validate(data)

    return _dependency
