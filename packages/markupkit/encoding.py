"""HTML entity encoding and embedding helpers.

These functions are used by every builder to put values into markup safely.
"""

import json
import re

from markupkit.config import settings

__all__ = [
    'encode',
    'decode',
    'json_html_encode',
    'escape_js_regular_expression',
]

# Ampersands that do not already start an entity like &amp; &#39; &#x27;
_BARE_AMPERSAND_PATTERN = re.compile(r'&(?!(?:[a-zA-Z][a-zA-Z0-9]*|#[0-9]+|#[xX][0-9a-fA-F]+);)')

_SPECIAL_ENTITY_PATTERN = re.compile(r'&(?:amp|lt|gt|quot|#0*39|#[xX]0*27);')

_DECODED = {
    '&amp;': '&',
    '&lt;': '<',
    '&gt;': '>',
    '&quot;': '"',
}

# JSON escape sequences and the characters that must not appear raw in HTML
_JSON_HTML_PATTERN = re.compile(r'\\.|[<>&\'/]')

_JSON_HTML_REPLACEMENTS = {
    '\\"': '\\u0022',
    '<': '\\u003C',
    '>': '\\u003E',
    '&': '\\u0026',
    "'": '\\u0027',
    '/': '\\/',
}


def encode(content, double_encode: bool = True) -> str:
    """Encode special characters into HTML entities.

    Replaces HTML special characters with their entity equivalents:
    - & → &amp;
    - < → &lt;
    - > → &gt;
    - " → &quot;
    - ' → &#x27;

    Values with an __html__ method (like Markup) are already safe and are
    returned without escaping. Bytes are decoded with the configured charset,
    invalid sequences become U+FFFD.

    Args:
        content: The value to encode. Can be any type.
        double_encode: Whether to encode entities already present in the
            content. When False, "&amp;" stays "&amp;".

    Returns:
        Encoded HTML string.

    Example:
        >>> encode("<a href='x'>")
        '&lt;a href=&#x27;x&#x27;&gt;'
        >>> encode("a &amp; b", double_encode=False)
        'a &amp; b'
    """
    if content is None:
        return ''
    if hasattr(content, '__html__'):
        return content.__html__()
    if isinstance(content, bytes):
        s = content.decode(settings.CHARSET, errors='replace')
    else:
        s = str(content)

    if double_encode:
        s = s.replace('&', '&amp;')
    else:
        s = _BARE_AMPERSAND_PATTERN.sub('&amp;', s)
    return (s
        .replace('<', '&lt;')
        .replace('>', '&gt;')
        .replace('"', '&quot;')
        .replace("'", '&#x27;'))


def decode(content) -> str:
    """Decode the entities produced by encode() back into characters.

    Only the special characters are decoded; other named or numeric entities
    are left as they are.

    Example:
        >>> decode('&lt;b&gt; &amp;copy; &copy;')
        '<b> &copy; &copy;'
    """
    if content is None:
        return ''

    def replace(match):
        entity = match.group(0)
        return _DECODED.get(entity, "'")

    return _SPECIAL_ENTITY_PATTERN.sub(replace, str(content))


def json_html_encode(value) -> str:
    """Encode a value as JSON that can sit inside an HTML attribute.

    Characters inside strings that could end a single-quoted attribute or
    open a tag are written as unicode escapes. The JSON structure itself keeps
    its double quotes.

    Example:
        >>> print(json_html_encode({"a": "<b>'"}))
        {"a":"\\u003Cb\\u003E\\u0027"}
    """
    s = json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    return _JSON_HTML_PATTERN.sub(lambda m: _JSON_HTML_REPLACEMENTS.get(m.group(0), m.group(0)), s)


def escape_js_regular_expression(regexp: str) -> str:
    """Convert a delimited PCRE pattern into a JavaScript regex literal.

    "\\x{41}" style code points become "\\u41", a non-slash delimiter is
    replaced by slashes, and only the i, g and m flags are kept.

    Example:
        >>> escape_js_regular_expression('#^a/b$#ui')
        '/^a\\\\/b$/i'
    """
    pattern = re.sub(r'\\x\{?([0-9a-fA-F]+)\}?', r'\\u\1', regexp)
    delimiter = pattern[:1]
    pos = pattern.rfind(delimiter, 1)
    flags = pattern[pos + 1:]
    if delimiter != '/':
        pattern = '/' + pattern[1:pos].replace('/', '\\/') + '/'
    else:
        pattern = pattern[:pos + 1]
    if flags:
        pattern += re.sub(r'[^igm]', '', flags)
    return pattern
