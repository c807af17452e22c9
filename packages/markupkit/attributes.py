"""Attribute expressions and the input names/ids/values derived from them.

An attribute expression is a model attribute name with optional array-index
prefix and/or suffix, used for tabular and array inputs:

- "[0]content": the "content" attribute of the first model in a tabular form;
- "dates[0]": the first element of the "dates" attribute;
- "[0]dates[0]": the first element of "dates" of the first model.
"""

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from markupkit.config import ATTRIBUTE_PATTERN
from markupkit.errors import InvalidArgumentError
from markupkit.model import HasPrimaryKey

__all__ = [
    'AttributeExpression',
    'parse_attribute_expression',
    'get_attribute_name',
    'get_attribute_value',
    'get_input_name',
    'get_input_id',
]

_ID_REPLACEMENTS = (
    ('[]', ''),
    ('][', '-'),
    ('[', '-'),
    (']', ''),
    (' ', '-'),
    ('.', '-'),
)


@dataclass(frozen=True)
class AttributeExpression:
    """A parsed attribute expression: prefix + name + suffix."""

    prefix: str
    name: str
    suffix: str

    @property
    def indexes(self) -> list[str]:
        """Array indexes in the suffix, e.g. ["0", "a"] for "[0][a]"."""
        if not self.suffix:
            return []
        return self.suffix.strip('[]').split('][')


def parse_attribute_expression(attribute: str) -> AttributeExpression:
    """Split an attribute expression into prefix, name and suffix.

    Raises:
        InvalidArgumentError: If the name contains non-word characters.

    Example:
        >>> parse_attribute_expression('[0]dates[1]')
        AttributeExpression(prefix='[0]', name='dates', suffix='[1]')
    """
    match = ATTRIBUTE_PATTERN.fullmatch(attribute)
    if match is None:
        raise InvalidArgumentError("Attribute name must contain word characters only.", argument=attribute)
    return AttributeExpression(*match.groups())


def get_attribute_name(attribute: str) -> str:
    """Return the bare attribute name of an expression.

    Example:
        >>> get_attribute_name('[0]dates[1]')
        'dates'
    """
    return parse_attribute_expression(attribute).name


def _primary_key_value(value):
    key = value.get_primary_key()
    return json.dumps(key) if isinstance(key, (dict, list, tuple)) else key


def get_attribute_value(model, attribute: str):
    """Return the value an attribute expression points at.

    For "[0]dates[0]" this is model.dates[0]. Missing indexes give None.
    Records exposing get_primary_key() are replaced by their primary key
    (JSON-encoded when composite), also inside lists.

    Raises:
        InvalidArgumentError: If the name contains non-word characters.
    """
    expression = parse_attribute_expression(attribute)
    value = getattr(model, expression.name, None)
    for index in expression.indexes:
        value = _lookup(value, index)
        if value is None:
            return None

    if isinstance(value, list):
        return [_primary_key_value(v) if isinstance(v, HasPrimaryKey) else v for v in value]
    if isinstance(value, dict):
        return {k: _primary_key_value(v) if isinstance(v, HasPrimaryKey) else v for k, v in value.items()}
    if isinstance(value, HasPrimaryKey):
        return _primary_key_value(value)
    return value


def _lookup(container, index: str):
    """Index into a mapping or sequence with a string index from the suffix."""
    if isinstance(container, Mapping):
        if index in container:
            return container[index]
        if index.lstrip('-').isdigit() and int(index) in container:
            return container[int(index)]
        return None
    if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
        if index.isdigit() and int(index) < len(container):
            return container[int(index)]
    return None


def get_input_name(model, attribute: str) -> str:
    """Return the input name for an attribute expression.

    The name is built from the model's form name: "content" of a "Post" form
    gives "Post[content]", "[0]content" gives "Post[0][content]". Models with
    an empty form name give bare names ("content", "dates[0]").

    Raises:
        InvalidArgumentError: If the name contains non-word characters, or a
            tabular expression is used with an empty form name.
    """
    form_name = model.form_name()
    expression = parse_attribute_expression(attribute)
    if form_name == '' and expression.prefix == '':
        return expression.name + expression.suffix
    if form_name != '':
        return f'{form_name}{expression.prefix}[{expression.name}]{expression.suffix}'
    raise InvalidArgumentError(
        f"{type(model).__name__}.form_name() cannot be empty for tabular inputs.",
        argument=attribute,
    )


def get_input_id(model, attribute: str) -> str:
    """Return the input id for an attribute expression.

    Example: "Post[content]" becomes "post-content".
    """
    name = get_input_name(model, attribute).lower()
    for old, new in _ID_REPLACEMENTS:
        name = name.replace(old, new)
    return name
