"""Select boxes, checkbox/radio lists and ul/ol lists.

Items are dicts mapping option values to labels. In select boxes a nested dict
is rendered as an <optgroup> labelled by its key.
"""

from collections.abc import Iterable, Mapping

from markupsafe import Markup

from markupkit.config import settings
from markupkit.encoding import encode
from markupkit.inputs import checkbox, form_value, hidden_input, radio
from markupkit.tags import tag

__all__ = [
    'render_select_options',
    'drop_down_list',
    'list_box',
    'checkbox_list',
    'radio_list',
    'ul',
    'ol',
]


def _is_collection(value) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


def _normalize_selection(selection):
    """Turn a collection selection into a list of strings."""
    if _is_collection(selection):
        values = selection.values() if isinstance(selection, Mapping) else selection
        return [form_value(v) for v in values]
    return selection


def _is_selected(key, selection) -> bool:
    """Whether an item key matches a single value or a collection of values."""
    if selection is None:
        return False
    if isinstance(selection, list):
        return form_value(key) in selection
    return form_value(key) == form_value(selection)


def render_select_options(selection, items: dict, tag_options: dict | None = None) -> str:
    """Render <option> and <optgroup> tags for a select box.

    The following keys are consumed from tag_options (and removed from it, so
    the remaining keys can be rendered on the <select> tag):

    - prompt: Text of a first option with an empty value. Either a string or
      {'text': ..., 'options': {...}} to give the prompt option attributes.
    - options: Per-value option attributes, e.g. {'1': {'disabled': True}}.
      An explicit "selected" here wins over the selection.
    - groups: Per-group optgroup attributes, keyed by group label.
    - encode: Whether labels are encoded. Defaults to True.
    - encode_spaces: Whether spaces in labels become &nbsp;.

    Args:
        selection: The selected value, or a collection of selected values.
        items: Option values mapped to labels, or to nested dicts for groups.
        tag_options: Options of the enclosing select tag.

    Returns:
        The option tags, one per line.
    """
    if tag_options is None:
        tag_options = {}
    selection = _normalize_selection(selection)

    lines = []
    encode_spaces = tag_options.pop('encode_spaces', settings.ENCODE_SPACES)
    encode_labels = tag_options.pop('encode', True)

    prompt = tag_options.pop('prompt', None)
    if prompt is not None:
        prompt_options = {'value': ''}
        if isinstance(prompt, str):
            prompt_text = prompt
        else:
            prompt_text = prompt['text']
            prompt_options.update(prompt.get('options', {}))
        if encode_labels:
            prompt_text = encode(prompt_text)
        if encode_spaces:
            prompt_text = prompt_text.replace(' ', '&nbsp;')
        lines.append(tag('option', prompt_text, prompt_options))

    options = dict(tag_options.pop('options', None) or {})
    groups = tag_options.pop('groups', None) or {}

    for key, value in items.items():
        if isinstance(value, Mapping):
            group_attrs = dict(groups.get(key, {}))
            group_attrs.setdefault('label', key)
            attrs = {
                'options': options,
                'groups': groups,
                'encode_spaces': encode_spaces,
                'encode': encode_labels,
            }
            content = render_select_options(selection, value, attrs)
            lines.append(tag('optgroup', f'\n{content}\n', group_attrs))
        else:
            attrs = dict(options.get(key, None) or options.get(str(key), None) or {})
            attrs['value'] = str(key)
            if 'selected' not in attrs:
                attrs['selected'] = _is_selected(key, selection)
            text = encode(value) if encode_labels else str(value)
            if encode_spaces:
                text = text.replace(' ', '&nbsp;')
            lines.append(tag('option', text, attrs))

    return '\n'.join(lines)


def drop_down_list(name: str | None, selection=None, items: dict | None = None, options: dict | None = None) -> Markup:
    """Render a drop-down list (<select>).

    When the "multiple" option is truthy this renders a list_box() instead.
    See render_select_options() for the option-related keys.

    Example:
        >>> drop_down_list('color', 'r', {'r': 'Red', 'g': 'Green'})
        Markup('<select name="color">\\n<option value="r" selected>Red</option>\\n<option value="g">Green</option>\\n</select>')
    """
    options = dict(options or {})
    if options.get('multiple'):
        return list_box(name, selection, items, options)
    options['name'] = name
    options.pop('unselect', None)
    select_options = render_select_options(selection, items or {}, options)
    return tag('select', f'\n{select_options}\n', options)


def list_box(name: str | None, selection=None, items: dict | None = None, options: dict | None = None) -> Markup:
    """Render a list box (<select size="...">).

    Special options:
    - size: Defaults to 4.
    - multiple: Allows several selections; "[]" is appended to the name.
    - unselect: Value of a hidden input rendered before the list box, so that
      a list box without selection still submits something.
    """
    options = dict(options or {})
    if 'size' not in options:
        options['size'] = 4
    if options.get('multiple') and name and not name.endswith('[]'):
        name += '[]'
    options['name'] = name

    hidden = ''
    unselect = options.pop('unselect', None)
    if unselect is not None:
        hidden_name = name[:-2] if name and name.endswith('[]') else name
        hidden_options = {}
        if options.get('disabled'):
            hidden_options['disabled'] = options['disabled']
        hidden = hidden_input(hidden_name, unselect, hidden_options)

    select_options = render_select_options(selection, items or {}, options)
    select = tag('select', f'\n{select_options}\n', options)
    return Markup(f'{hidden}{select}')


def _choice_list(builder, name: str, selection, items: dict, options: dict, hidden: str) -> Markup:
    """Render the items of a checkbox or radio list."""
    formatter = options.pop('item', None)
    item_options = options.pop('item_options', None) or {}
    encode_labels = options.pop('encode', True)
    separator = options.pop('separator', '\n')
    tag_name = options.pop('tag', 'div')

    selection = _normalize_selection(selection)
    lines = []
    for index, (value, label) in enumerate(items.items()):
        checked = _is_selected(value, selection)
        if formatter is not None:
            lines.append(formatter(index, label, name, checked, value))
        else:
            lines.append(builder(name, checked, {
                'value': value,
                'label': encode(label) if encode_labels else label,
                **item_options,
            }))

    visible_content = separator.join(str(line) for line in lines)
    if tag_name is False:
        return Markup(f'{hidden}{visible_content}')
    return Markup(f'{hidden}{tag(tag_name, visible_content, options)}')


def _unselect_input(name: str | None, options: dict) -> str:
    """Pop the "unselect" option and render its hidden input."""
    if options.get('unselect') is None:
        options.pop('unselect', None)
        return ''
    unselect = options.pop('unselect')
    hidden_options = {}
    # A disabled list must not submit the unselect value
    if options.get('disabled'):
        hidden_options['disabled'] = options['disabled']
    options.pop('disabled', None)
    return hidden_input(name, unselect, hidden_options)


def checkbox_list(name: str, selection=None, items: dict | None = None, options: dict | None = None) -> Markup:
    """Render a list of checkboxes.

    The name gets a "[]" suffix so that all checked values are submitted.

    Special options:
    - tag: Container tag, "div" by default. False renders no container.
    - unselect: Value submitted when nothing is checked.
    - encode: Whether labels are encoded. Defaults to True.
    - separator: Inserted between checkboxes, a newline by default.
    - item_options: Options passed to every checkbox().
    - item: A callable (index, label, name, checked, value) rendering one
      item, used instead of checkbox().
    """
    options = dict(options or {})
    if name and not name.endswith('[]'):
        name += '[]'
    hidden = _unselect_input(name[:-2] if name else name, options)
    return _choice_list(checkbox, name, selection, items or {}, options, hidden)


def radio_list(name: str, selection=None, items: dict | None = None, options: dict | None = None) -> Markup:
    """Render a list of radio buttons.

    Takes the same special options as checkbox_list().
    """
    options = dict(options or {})
    hidden = _unselect_input(name, options)
    return _choice_list(radio, name, selection, items or {}, options, hidden)


def ul(items, options: dict | None = None) -> Markup:
    """Render an unordered list.

    Special options:
    - tag: The list tag, "ul" by default.
    - encode: Whether items are encoded. Defaults to True.
    - item: A callable (item, index) rendering one list item.
    - separator: Inserted between items, a newline by default.
    - item_options: Attributes of every <li> tag.

    Example:
        >>> ul(['a', '<b>'])
        Markup('<ul>\\n<li>a</li>\\n<li>&lt;b&gt;</li>\\n</ul>')
    """
    options = dict(options or {})
    tag_name = options.pop('tag', 'ul')
    encode_items = options.pop('encode', True)
    formatter = options.pop('item', None)
    separator = options.pop('separator', '\n')
    item_options = options.pop('item_options', None) or {}

    if not items:
        return tag(tag_name, '', options)

    pairs = items.items() if isinstance(items, Mapping) else enumerate(items)
    results = []
    for index, item in pairs:
        if formatter is not None:
            results.append(str(formatter(item, index)))
        else:
            results.append(tag('li', encode(item) if encode_items else item, item_options))

    return tag(tag_name, f'{separator}{separator.join(results)}{separator}', options)


def ol(items, options: dict | None = None) -> Markup:
    """Render an ordered list. Takes the same options as ul()."""
    options = dict(options or {})
    options['tag'] = 'ol'
    return ul(items, options)
