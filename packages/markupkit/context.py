"""Request context and URL resolution for form and link builders.

markupkit does not handle requests or routing. The web framework hands over
what the builders need: a RequestContext with the CSRF and method-override
parameter names, and optionally a resolver turning route descriptions into
URLs.

Usage:
    ctx = RequestContext(csrf_token=token)
    with use_request(ctx):
        html = begin_form('/post/update', 'put')
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Callable

from markupkit.errors import InvalidArgumentError

__all__ = [
    'RequestContext',
    'current_request',
    'use_request',
    'set_url_resolver',
    'url_to',
]


@dataclass(frozen=True)
class RequestContext:
    """Request data needed to render forms."""

    csrf_param: str = '_csrf'
    csrf_token: str | None = None
    method_param: str = '_method'
    enable_csrf_validation: bool = True


_current_request: ContextVar[RequestContext | None] = ContextVar('markupkit_request', default=None)
_url_resolver: Callable[[Any], str] | None = None


def current_request(request: RequestContext | None = None) -> RequestContext | None:
    """Return the given request, or the one installed with use_request()."""
    if request is not None:
        return request
    return _current_request.get()


@contextmanager
def use_request(request: RequestContext | None):
    """Install a request context for builders called without request=."""
    token = _current_request.set(request)
    try:
        yield request
    finally:
        _current_request.reset(token)


def set_url_resolver(resolver: Callable[[Any], str] | None) -> None:
    """Register the callable that turns route descriptions into URLs.

    Pass None to remove the resolver.
    """
    global _url_resolver
    _url_resolver = resolver


def url_to(url) -> str:
    """Resolve a URL argument.

    Strings are already URLs and pass through. Anything else (a route tuple,
    a dict of route params) is handed to the registered resolver.

    Raises:
        InvalidArgumentError: If no resolver is registered for a non-string URL.
    """
    if isinstance(url, str):
        return url
    if _url_resolver is None:
        raise InvalidArgumentError("No URL resolver registered for non-string URL.", argument=str(url))
    return _url_resolver(url)
