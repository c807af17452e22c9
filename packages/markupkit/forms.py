"""Form open/close tags and CSRF meta tags."""

import logging
from urllib.parse import unquote_plus

from markupsafe import Markup

from markupkit.context import RequestContext, current_request, url_to
from markupkit.inputs import hidden_input
from markupkit.tags import begin_tag, tag

__all__ = [
    'csrf_meta_tags',
    'begin_form',
    'end_form',
]

logger = logging.getLogger(__name__)


def _csrf_enabled(request: RequestContext | None) -> bool:
    return request is not None and request.enable_csrf_validation and request.csrf_token is not None


def csrf_meta_tags(request: RequestContext | None = None) -> Markup:
    """Render meta tags carrying the CSRF parameter name and token.

    Renders nothing when there is no request or CSRF validation is disabled.
    """
    request = current_request(request)
    if not _csrf_enabled(request):
        return Markup('')
    param = tag('meta', '', {'name': 'csrf-param', 'content': request.csrf_param})
    token = tag('meta', '', {'name': 'csrf-token', 'content': request.csrf_token})
    return Markup(f'{param}\n    {token}\n')


def begin_form(action='', method: str = 'post', options: dict | None = None,
               request: RequestContext | None = None) -> Markup:
    """Render an opening form tag.

    Browsers only submit GET and POST. Other methods ("put", "delete", ...)
    are sent as POST with a hidden input named after request.method_param
    carrying the real method.

    For GET forms, query parameters in the action URL are dropped by
    browsers, so they are moved into hidden inputs.

    Special options:
    - csrf: Whether to render the CSRF hidden input for POST forms. Defaults
      to True; the input also needs a request with a CSRF token.

    Args:
        action: The form action URL, resolved with url_to().
        method: The submission method, case-insensitive.
        options: Attributes of the form tag.
        request: Request context, defaults to the one set by use_request().
    """
    options = dict(options or {})
    action = url_to(action)
    request = current_request(request)
    hidden_inputs = []

    csrf = options.pop('csrf', True)
    if request is not None:
        if method.lower() not in ('get', 'post'):
            logger.debug("Emulating %s form submission with POST", method)
            hidden_inputs.append(hidden_input(request.method_param, method))
            method = 'post'
        if csrf and _csrf_enabled(request) and method.lower() == 'post':
            hidden_inputs.append(hidden_input(request.csrf_param, request.csrf_token))

    if method.lower() == 'get' and '?' in action:
        action, query = action.split('?', 1)
        for pair in query.split('&'):
            if '=' in pair:
                key, value = pair.split('=', 1)
                hidden_inputs.append(hidden_input(unquote_plus(key), unquote_plus(value)))
            else:
                hidden_inputs.append(hidden_input(unquote_plus(pair), ''))

    options['action'] = action
    options['method'] = method
    form = begin_tag('form', options)
    if hidden_inputs:
        return Markup(f'{form}\n' + '\n'.join(hidden_inputs))
    return form


def end_form() -> Markup:
    return Markup('</form>')
