"""Tag and attribute rendering.

Every other builder in markupkit ends up in tag(). Content passed to these
functions is inserted as-is (encode() untrusted text first); attribute values
are always encoded.
"""

from markupsafe import Markup

from markupkit.config import ATTRIBUTE_ORDER, DATA_ATTRIBUTES, VOID_ELEMENTS
from markupkit.context import url_to
from markupkit.css import css_style_from_dict
from markupkit.encoding import encode, json_html_encode

__all__ = [
    'render_tag_attributes',
    'tag',
    'begin_tag',
    'end_tag',
    'style',
    'script',
    'css_file',
    'js_file',
    'a',
    'mailto',
    'img',
    'label',
    'button',
    'submit_button',
    'reset_button',
]


def render_tag_attributes(attributes: dict | None) -> str:
    """Render tag options as HTML attributes.

    Rendering rules:
    - Attributes listed in ATTRIBUTE_ORDER come first, in that order; the
      rest keep their insertion order.
    - True renders just the attribute name, False and None render nothing.
    - Dict values of data attributes expand to data-key="value" pairs, with
      nested lists/dicts rendered as single-quoted JSON.
    - A class list is joined with spaces, a style dict becomes a CSS string.
    - Any other list/dict value is rendered as single-quoted JSON.

    Args:
        attributes: Attribute names mapped to values.

    Returns:
        Rendered attributes with a leading space, or an empty string.

    Example:
        >>> render_tag_attributes({'class': 'btn', 'type': 'submit', 'disabled': True})
        ' type="submit" class="btn" disabled'
        >>> render_tag_attributes({'data': {'id': 1, 'params': {'a': 1}}})
        ' data-id="1" data-params=\\'{"a":1}\\''
    """
    if not attributes:
        return ''

    if len(attributes) > 1:
        ordered = {name: attributes[name] for name in ATTRIBUTE_ORDER if attributes.get(name) is not None}
        attributes = {**ordered, **attributes}

    parts = []
    for name, value in attributes.items():
        if isinstance(value, bool):
            if value:
                parts.append(f' {name}')
        elif isinstance(value, (list, tuple, dict)):
            if name in DATA_ATTRIBUTES:
                items = value.items() if isinstance(value, dict) else enumerate(value)
                for key, item in items:
                    if isinstance(item, (list, tuple, dict)):
                        parts.append(f" {name}-{key}='{json_html_encode(item)}'")
                    elif isinstance(item, bool):
                        if item:
                            parts.append(f' {name}-{key}')
                    elif item is not None:
                        parts.append(f' {name}-{key}="{encode(item)}"')
            elif name == 'class':
                if not value:
                    continue
                classes = value.values() if isinstance(value, dict) else value
                parts.append(f' {name}="{encode(" ".join(str(c) for c in classes))}"')
            elif name == 'style':
                if not value:
                    continue
                if isinstance(value, dict):
                    value = css_style_from_dict(value)
                else:
                    value = ' '.join(str(v) for v in value)
                parts.append(f' {name}="{encode(value)}"')
            else:
                parts.append(f" {name}='{json_html_encode(value)}'")
        elif value is not None:
            parts.append(f' {name}="{encode(value)}"')

    return ''.join(parts)


def tag(name: str | None | bool, content='', options: dict | None = None) -> Markup:
    """Render a complete HTML tag.

    Args:
        name: The tag name. None or False renders the content without a tag.
        content: Content between the opening and closing tags. It is not
            encoded.
        options: Tag attributes, see render_tag_attributes().

    Returns:
        The rendered tag. Void elements get neither content nor a closing tag.

    Example:
        >>> tag('input', '', {'type': 'text', 'name': 'a', 'value': None})
        Markup('<input type="text" name="a">')
        >>> tag('p', 'Hi', {'class': ['a', 'b']})
        Markup('<p class="a b">Hi</p>')
    """
    if name is None or name is False:
        return Markup(content if content is not None else '')
    html = f'<{name}{render_tag_attributes(options)}>'
    if name.lower() in VOID_ELEMENTS:
        return Markup(html)
    return Markup(f'{html}{content if content is not None else ""}</{name}>')


def begin_tag(name: str | None | bool, options: dict | None = None) -> Markup:
    """Render an opening tag. None or False renders nothing."""
    if name is None or name is False:
        return Markup('')
    return Markup(f'<{name}{render_tag_attributes(options)}>')


def end_tag(name: str | None | bool) -> Markup:
    """Render a closing tag. None or False renders nothing."""
    if name is None or name is False:
        return Markup('')
    return Markup(f'</{name}>')


def style(content, options: dict | None = None) -> Markup:
    return tag('style', content, options)


def script(content, options: dict | None = None) -> Markup:
    return tag('script', content, options)


def _wrap_into_condition(content: str, condition: str) -> Markup:
    """Wrap content in an IE conditional comment, e.g. "lt IE 9"."""
    if '!IE' in condition:
        return Markup(f'<!--[if {condition}]><!-->\n{content}\n<!--<![endif]-->')
    return Markup(f'<!--[if {condition}]>\n{content}\n<![endif]-->')


def css_file(url, options: dict | None = None) -> Markup:
    """Render a <link> tag for an external stylesheet.

    Special options:
    - condition: IE conditional comment to wrap the tag in, e.g. "lt IE 9".
    - noscript: When True, wrap the tag in <noscript>.

    The remaining options are rendered as attributes. "rel" defaults to
    "stylesheet".
    """
    options = dict(options or {})
    if options.get('rel') is None:
        options['rel'] = 'stylesheet'
    options['href'] = url_to(url)

    condition = options.pop('condition', None)
    if condition is not None:
        return _wrap_into_condition(tag('link', '', options), condition)
    if options.get('noscript') is True:
        del options['noscript']
        return Markup(f'<noscript>{tag("link", "", options)}</noscript>')
    return tag('link', '', options)


def js_file(url, options: dict | None = None) -> Markup:
    """Render a <script> tag for an external script.

    A "condition" option wraps the tag in an IE conditional comment.
    """
    options = dict(options or {})
    options['src'] = url_to(url)
    condition = options.pop('condition', None)
    if condition is not None:
        return _wrap_into_condition(tag('script', '', options), condition)
    return tag('script', '', options)


def a(text, url=None, options: dict | None = None) -> Markup:
    """Render a hyperlink. No href is rendered when url is None."""
    options = dict(options or {})
    if url is not None:
        options['href'] = url_to(url)
    return tag('a', text, options)


def mailto(text, email: str | None = None, options: dict | None = None) -> Markup:
    """Render a mailto link. The text is used as the address if email is None."""
    options = dict(options or {})
    options['href'] = f'mailto:{text if email is None else email}'
    return tag('a', text, options)


def img(src, options: dict | None = None) -> Markup:
    """Render an image tag.

    "srcset" may be a dict of descriptor to URL, e.g. {'2x': '/a@2x.png'}.
    "alt" defaults to an empty string.
    """
    options = dict(options or {})
    options['src'] = url_to(src)
    srcset = options.get('srcset')
    if isinstance(srcset, dict):
        options['srcset'] = ','.join(f'{url_to(url)} {descriptor}' for descriptor, url in srcset.items())
    if options.get('alt') is None:
        options['alt'] = ''
    return tag('img', '', options)


def label(content, for_: str | None = None, options: dict | None = None) -> Markup:
    """Render a label tag. No "for" attribute is rendered when for_ is None."""
    options = dict(options or {})
    options['for'] = for_
    return tag('label', content, options)


def button(content='Button', options: dict | None = None) -> Markup:
    """Render a button tag. "type" defaults to "button"."""
    options = dict(options or {})
    if options.get('type') is None:
        options['type'] = 'button'
    return tag('button', content, options)


def submit_button(content='Submit', options: dict | None = None) -> Markup:
    options = dict(options or {})
    options['type'] = 'submit'
    return button(content, options)


def reset_button(content='Reset', options: dict | None = None) -> Markup:
    options = dict(options or {})
    options['type'] = 'reset'
    return button(content, options)
