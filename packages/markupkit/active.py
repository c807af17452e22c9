"""Model-bound ("active") builders.

These derive the name, id, value, label and error of an input from a model
and an attribute expression, then delegate to the plain builders. Any model
implementing markupkit.model.Model works; FormModel is the pydantic-backed
one.

Options given explicitly ("name", "value", "id", "label", ...) always win
over what is read from the model.
"""

from markupsafe import Markup

from markupkit.attributes import get_attribute_name, get_attribute_value, get_input_id, get_input_name
from markupkit.encoding import encode
from markupkit.inputs import checkbox, form_value, input, radio, textarea
from markupkit.lists import checkbox_list, drop_down_list, list_box, radio_list
from markupkit.tags import label, tag

__all__ = [
    'BOOLEAN_INPUTS',
    'LIST_INPUTS',
    'active_label',
    'active_hint',
    'error_summary',
    'error',
    'active_input',
    'active_text_input',
    'active_hidden_input',
    'active_password_input',
    'active_file_input',
    'active_textarea',
    'active_radio',
    'active_checkbox',
    'active_drop_down_list',
    'active_list_box',
    'active_checkbox_list',
    'active_radio_list',
]

# Builders selected by input type name
BOOLEAN_INPUTS = {
    'checkbox': checkbox,
    'radio': radio,
}

LIST_INPUTS = {
    'drop_down_list': drop_down_list,
    'list_box': list_box,
    'checkbox_list': checkbox_list,
    'radio_list': radio_list,
}

DEFAULT_ERROR_SUMMARY_HEADER = '<p>Please fix the following errors:</p>'


def active_label(model, attribute: str, options: dict | None = None) -> Markup:
    """Render a label for a model attribute.

    Special options:
    - label: Label text, not encoded. Defaults to the encoded model label.
    - for: Id of the labelled input. Defaults to get_input_id().
    """
    options = dict(options or {})
    for_ = options.pop('for') if 'for' in options else get_input_id(model, attribute)
    name = get_attribute_name(attribute)
    text = options.pop('label') if 'label' in options else encode(model.get_attribute_label(name))
    return label(text, for_, options)


def active_hint(model, attribute: str, options: dict | None = None) -> Markup:
    """Render the hint of a model attribute, or '' when it has none.

    Special options:
    - hint: Hint text, not encoded. Defaults to the model hint.
    - tag: The container tag, "div" by default.
    """
    options = dict(options or {})
    name = get_attribute_name(attribute)
    hint = options.pop('hint', None)
    if hint is None:
        hint = model.get_attribute_hint(name)
    if not hint:
        return Markup('')
    tag_name = options.pop('tag', 'div')
    return tag(tag_name, hint, options)


def _collect_errors(models, encode_errors: bool, show_all_errors: bool) -> list[str]:
    if not isinstance(models, (list, tuple)):
        models = [models]
    lines = []
    for model in models:
        for line in model.get_error_summary(show_all_errors):
            if line not in lines:
                lines.append(line)
    if encode_errors:
        lines = [encode(line) for line in lines]
    return lines


def error_summary(models, options: dict | None = None) -> Markup:
    """Render a summary of the validation errors of one or more models.

    With no errors an empty, hidden summary is still rendered so client-side
    validation can fill it.

    Special options:
    - header: HTML before the error list.
    - footer: HTML after the error list.
    - encode: Whether messages are encoded. Defaults to True.
    - show_all_errors: Show every message of an attribute instead of only
      the first one.
    """
    options = dict(options or {})
    header = options.pop('header', DEFAULT_ERROR_SUMMARY_HEADER)
    footer = options.pop('footer', '')
    encode_errors = options.pop('encode', True)
    show_all_errors = options.pop('show_all_errors', False)

    lines = _collect_errors(models, encode_errors, show_all_errors)
    if not lines:
        content = '<ul></ul>'
        style = options.get('style')
        if isinstance(style, dict):
            options['style'] = {**style, 'display': 'none'}
        else:
            options['style'] = f"{style.rstrip(';')}; display:none" if style else 'display:none'
    else:
        content = '<ul><li>' + '</li>\n<li>'.join(lines) + '</li></ul>'
    return tag('div', f'{header}{content}{footer}', options)


def error(model, attribute: str, options: dict | None = None) -> Markup:
    """Render the first validation error of a model attribute.

    Special options:
    - tag: The container tag, "div" by default.
    - encode: Whether the message is encoded. Defaults to True.
    - error_source: A callable (model, attribute) returning the message to
      show, used instead of model.get_first_error().
    """
    options = dict(options or {})
    name = get_attribute_name(attribute)
    error_source = options.pop('error_source', None)
    if error_source is not None:
        message = error_source(model, name)
    else:
        message = model.get_first_error(name)
    tag_name = options.pop('tag', 'div')
    encode_message = options.pop('encode', True)
    return tag(tag_name, encode(message) if encode_message else (message or ''), options)


def _set_active_placeholder(model, attribute: str, options: dict) -> None:
    if options.get('placeholder') is True:
        options['placeholder'] = model.get_attribute_label(get_attribute_name(attribute))


def _normalize_max_length(model, attribute: str, options: dict) -> None:
    """Replace maxlength=True with the limit of the attribute's validators."""
    if options.get('maxlength') is not True:
        return
    del options['maxlength']
    for validator in model.get_active_validators(get_attribute_name(attribute)):
        max_length = getattr(validator, 'max_length', None)
        if max_length is not None:
            options['maxlength'] = max_length
            break


def active_input(type_: str, model, attribute: str, options: dict | None = None) -> Markup:
    """Render an input of the given type for a model attribute.

    Special options:
    - maxlength: True uses the max length of the attribute's validators.
    - placeholder: True uses the attribute label.
    """
    options = dict(options or {})
    name = options['name'] if options.get('name') is not None else get_input_name(model, attribute)
    value = options['value'] if options.get('value') is not None else get_attribute_value(model, attribute)
    if 'id' not in options:
        options['id'] = get_input_id(model, attribute)
    _set_active_placeholder(model, attribute, options)
    _normalize_max_length(model, attribute, options)
    return input(type_, name, value, options)


def active_text_input(model, attribute: str, options: dict | None = None) -> Markup:
    return active_input('text', model, attribute, options)


def active_hidden_input(model, attribute: str, options: dict | None = None) -> Markup:
    return active_input('hidden', model, attribute, options)


def active_password_input(model, attribute: str, options: dict | None = None) -> Markup:
    return active_input('password', model, attribute, options)


def active_file_input(model, attribute: str, options: dict | None = None) -> Markup:
    """Render a file input preceded by a hidden input with an empty value.

    The hidden input makes the attribute show up in the submitted data even
    when no file is chosen. Its attributes can be set with "hidden_options".
    """
    options = dict(options or {})
    hidden_options = {'id': None, 'value': ''}
    if options.get('name') is not None:
        hidden_options['name'] = options['name']
    # A disabled input must not submit the empty value either
    if options.get('disabled'):
        hidden_options['disabled'] = options['disabled']
    hidden_options.update(options.pop('hidden_options', None) or {})
    hidden = active_hidden_input(model, attribute, hidden_options)
    return Markup(f"{hidden}{active_input('file', model, attribute, options)}")


def active_textarea(model, attribute: str, options: dict | None = None) -> Markup:
    options = dict(options or {})
    name = options['name'] if options.get('name') is not None else get_input_name(model, attribute)
    value = options.pop('value', None)
    if value is None:
        value = get_attribute_value(model, attribute)
    if 'id' not in options:
        options['id'] = get_input_id(model, attribute)
    _normalize_max_length(model, attribute, options)
    _set_active_placeholder(model, attribute, options)
    return textarea(name, value, options)


def _active_boolean_input(type_: str, model, attribute: str, options: dict | None = None) -> Markup:
    options = dict(options or {})
    name = options['name'] if options.get('name') is not None else get_input_name(model, attribute)
    value = get_attribute_value(model, attribute)

    if 'value' not in options:
        options['value'] = '1'
    if 'uncheck' not in options:
        options['uncheck'] = '0'
    elif options['uncheck'] is False:
        del options['uncheck']
    if 'label' not in options:
        options['label'] = encode(model.get_attribute_label(get_attribute_name(attribute)))
    elif options['label'] is False:
        del options['label']

    checked = form_value(value) == form_value(options['value'])
    if 'id' not in options:
        options['id'] = get_input_id(model, attribute)
    return BOOLEAN_INPUTS[type_](name, checked, options)


def active_radio(model, attribute: str, options: dict | None = None) -> Markup:
    """Render a radio button for a model attribute.

    "uncheck" defaults to "0" and "label" to the model label; pass False to
    disable either.
    """
    return _active_boolean_input('radio', model, attribute, options)


def active_checkbox(model, attribute: str, options: dict | None = None) -> Markup:
    """Render a checkbox for a model attribute.

    "uncheck" defaults to "0" and "label" to the model label; pass False to
    disable either.
    """
    return _active_boolean_input('checkbox', model, attribute, options)


def _active_list_input(type_: str, model, attribute: str, items: dict, options: dict | None = None) -> Markup:
    options = dict(options or {})
    name = options['name'] if options.get('name') is not None else get_input_name(model, attribute)
    selection = options['value'] if options.get('value') is not None else get_attribute_value(model, attribute)
    if 'unselect' not in options:
        options['unselect'] = ''
    if 'id' not in options:
        options['id'] = get_input_id(model, attribute)
    return LIST_INPUTS[type_](name, selection, items, options)


def active_drop_down_list(model, attribute: str, items: dict, options: dict | None = None) -> Markup:
    """Render a drop-down list for a model attribute.

    A truthy "multiple" option renders active_list_box() instead.
    """
    if options and options.get('multiple'):
        return active_list_box(model, attribute, items, options)
    return _active_list_input('drop_down_list', model, attribute, items, options)


def active_list_box(model, attribute: str, items: dict, options: dict | None = None) -> Markup:
    return _active_list_input('list_box', model, attribute, items, options)


def active_checkbox_list(model, attribute: str, items: dict, options: dict | None = None) -> Markup:
    return _active_list_input('checkbox_list', model, attribute, items, options)


def active_radio_list(model, attribute: str, items: dict, options: dict | None = None) -> Markup:
    return _active_list_input('radio_list', model, attribute, items, options)
