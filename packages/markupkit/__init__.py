"""markupkit - HTML markup helpers for Python web applications.

Public API exports:
- Encoding helpers (from markupkit.encoding)
- Tag and form builders (from markupkit.tags, markupkit.forms, markupkit.inputs, markupkit.lists)
- Model-bound builders (from markupkit.active, markupkit.attributes, markupkit.model)
- CSS helpers (from markupkit.css)
"""

from markupsafe import Markup

# Encoding
from markupkit.encoding import (
    decode,
    encode,
    escape_js_regular_expression,
    json_html_encode,
)

# Tags
from markupkit.tags import (
    a,
    begin_tag,
    button,
    css_file,
    end_tag,
    img,
    js_file,
    label,
    mailto,
    render_tag_attributes,
    reset_button,
    script,
    style,
    submit_button,
    tag,
)
from markupkit.forms import begin_form, csrf_meta_tags, end_form

# Inputs and lists
from markupkit.inputs import (
    button_input,
    checkbox,
    file_input,
    hidden_input,
    input,
    password_input,
    radio,
    reset_input,
    submit_input,
    text_input,
    textarea,
)
from markupkit.lists import (
    checkbox_list,
    drop_down_list,
    list_box,
    ol,
    radio_list,
    render_select_options,
    ul,
)

# Model binding
from markupkit.attributes import (
    AttributeExpression,
    get_attribute_name,
    get_attribute_value,
    get_input_id,
    get_input_name,
    parse_attribute_expression,
)
from markupkit.model import FormModel, HasPrimaryKey, Model
from markupkit.active import (
    active_checkbox,
    active_checkbox_list,
    active_drop_down_list,
    active_file_input,
    active_hidden_input,
    active_hint,
    active_input,
    active_label,
    active_list_box,
    active_password_input,
    active_radio,
    active_radio_list,
    active_text_input,
    active_textarea,
    error,
    error_summary,
)

# CSS
from markupkit.css import (
    add_css_class,
    add_css_style,
    css_style_from_dict,
    css_style_to_dict,
    remove_css_class,
    remove_css_style,
)

# Collaborators and configuration
from markupkit.context import RequestContext, set_url_resolver, url_to, use_request
from markupkit.config import settings
from markupkit.errors import InvalidArgumentError, MarkupError

__all__ = [
    'Markup',
    # Encoding
    'encode',
    'decode',
    'json_html_encode',
    'escape_js_regular_expression',
    # Tags
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
    # Forms
    'csrf_meta_tags',
    'begin_form',
    'end_form',
    # Inputs
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
    # Lists
    'render_select_options',
    'drop_down_list',
    'list_box',
    'checkbox_list',
    'radio_list',
    'ul',
    'ol',
    # Model binding
    'AttributeExpression',
    'parse_attribute_expression',
    'get_attribute_name',
    'get_attribute_value',
    'get_input_name',
    'get_input_id',
    'Model',
    'HasPrimaryKey',
    'FormModel',
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
    # CSS
    'add_css_class',
    'remove_css_class',
    'add_css_style',
    'remove_css_style',
    'css_style_from_dict',
    'css_style_to_dict',
    # Collaborators and configuration
    'RequestContext',
    'use_request',
    'set_url_resolver',
    'url_to',
    'settings',
    'MarkupError',
    'InvalidArgumentError',
]
