from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RequestContext:
    request_id: str
    path: str = "-"


_request_ctx_var: ContextVar[Optional[RequestContext]] = ContextVar("request_context", default=None)


def bind_request(request_id: Optional[str] = None, *, path: str = "-") -> Token:
    """Bind a request context for the current task, generating an id when none is given."""
    context = RequestContext(request_id=request_id or uuid.uuid4().hex, path=path)
    return _request_ctx_var.set(context)


def current_request() -> Optional[RequestContext]:
    return _request_ctx_var.get()


def get_request_id() -> Optional[str]:
    context = _request_ctx_var.get()
    return context.request_id if context else None


def unbind_request(token: Token) -> None:
    _request_ctx_var.reset(token)
