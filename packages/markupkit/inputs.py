"""Form input builders.

Thin wrappers over tag() that fix the type, name and value of <input>,
<textarea> and boolean (checkbox/radio) inputs.
"""

from markupsafe import Markup

from markupkit.encoding import encode
from markupkit.tags import label, tag

__all__ = [
    'input',
    'button_input',
    'submit_input',
    'reset_input',
    'text_input',
    'hidden_input',
    'password_input',
    'file_input',
    'textarea',
    'radio',
    'checkbox',
]


def input(type_: str, name: str | None = None, value=None, options: dict | None = None) -> Markup:
    """Render an input tag of the given type.

    Args:
        type_: The "type" attribute. A "type" already in options wins.
        name: The "name" attribute, not rendered when None.
        value: The "value" attribute, not rendered when None.
        options: Other tag attributes.

    Example:
        >>> input('text', 'q', 'x', {'class': 'search'})
        Markup('<input type="text" class="search" name="q" value="x">')
    """
    options = dict(options or {})
    if options.get('type') is None:
        options['type'] = type_
    options['name'] = name
    options['value'] = None if value is None else form_value(value)
    return tag('input', '', options)


def form_value(value):
    """Return a value as the string a browser would submit for it.

    True becomes "1", False and None become "". Markup stays trusted.
    """
    if value is None or value is False:
        return ''
    if value is True:
        return '1'
    if hasattr(value, '__html__') or isinstance(value, str):
        return value
    return str(value)


def button_input(label='Button', options: dict | None = None) -> Markup:
    options = dict(options or {})
    options['type'] = 'button'
    options['value'] = label
    return tag('input', '', options)


def submit_input(label='Submit', options: dict | None = None) -> Markup:
    options = dict(options or {})
    options['type'] = 'submit'
    options['value'] = label
    return tag('input', '', options)


def reset_input(label='Reset', options: dict | None = None) -> Markup:
    options = dict(options or {})
    options['type'] = 'reset'
    options['value'] = label
    return tag('input', '', options)


def text_input(name: str | None, value=None, options: dict | None = None) -> Markup:
    return input('text', name, value, options)


def hidden_input(name: str | None, value=None, options: dict | None = None) -> Markup:
    return input('hidden', name, value, options)


def password_input(name: str | None, value=None, options: dict | None = None) -> Markup:
    return input('password', name, value, options)


def file_input(name: str | None, value=None, options: dict | None = None) -> Markup:
    return input('file', name, value, options)


def textarea(name: str | None, value='', options: dict | None = None) -> Markup:
    """Render a textarea. The value is encoded.

    A "double_encode" option (default True) controls whether entities already
    in the value are encoded again.
    """
    options = dict(options or {})
    options['name'] = name
    double_encode = options.pop('double_encode', True)
    return tag('textarea', encode(value, double_encode), options)


def radio(name: str | None, checked: bool = False, options: dict | None = None) -> Markup:
    """Render a radio button. See checkbox() for the special options."""
    return _boolean_input('radio', name, checked, options)


def checkbox(name: str | None, checked: bool = False, options: dict | None = None) -> Markup:
    """Render a checkbox.

    Special options:
    - uncheck: Value of a hidden input rendered right before the checkbox,
      so that an unchecked box still submits something.
    - label: Label text. When set, the checkbox is wrapped in a <label>.
      The text is not encoded.
    - label_options: Attributes of that <label>.

    A "checked" option wins over the checked argument. "value" defaults to "1".

    Example:
        >>> checkbox('agree', True, {'uncheck': '0'})
        Markup('<input type="hidden" name="agree" value="0"><input type="checkbox" name="agree" value="1" checked>')
    """
    return _boolean_input('checkbox', name, checked, options)


def _boolean_input(type_: str, name: str | None, checked: bool = False, options: dict | None = None) -> Markup:
    options = dict(options or {})
    if options.get('checked') is None:
        options['checked'] = bool(checked)
    value = options['value'] if 'value' in options else '1'

    hidden = ''
    uncheck = options.pop('uncheck', None)
    if uncheck is not None:
        hidden_options = {}
        if options.get('form') is not None:
            hidden_options['form'] = options['form']
        # A disabled input must not submit the unchecked value either
        if options.get('disabled'):
            hidden_options['disabled'] = options['disabled']
        hidden = hidden_input(name, uncheck, hidden_options)

    label_text = options.pop('label', None)
    label_options = options.pop('label_options', None) or {}
    if label_text is not None:
        content = label(f'{input(type_, name, value, options)} {label_text}', None, label_options)
        return Markup(f'{hidden}{content}')

    return Markup(f'{hidden}{input(type_, name, value, options)}')
