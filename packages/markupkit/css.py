"""CSS class and style helpers for tag options.

The add/remove functions modify the options dict they are given, the same way
dict.update() does, and return None.
"""

import logging

__all__ = [
    'add_css_class',
    'remove_css_class',
    'add_css_style',
    'remove_css_style',
    'css_style_from_dict',
    'css_style_to_dict',
]

logger = logging.getLogger(__name__)


def _as_classes(value) -> list | dict:
    """Normalize a class argument into a list (or a dict for named classes)."""
    if value is None:
        return []
    if isinstance(value, (list, dict)):
        return value
    if isinstance(value, (tuple, set, frozenset)):
        return list(value)
    if isinstance(value, str):
        return value.split()
    return [value]


def _merge_css_classes(existing: list | dict, additional: list | dict) -> list | dict:
    """Merge additional classes into existing ones.

    Named (string-keyed) classes that already exist win over additions with the
    same key. Positional classes are appended unless already present.
    """
    if isinstance(existing, list) and isinstance(additional, list):
        merged = list(existing)
        for cls in additional:
            if cls not in merged:
                merged.append(cls)
        return merged

    merged = dict(enumerate(existing)) if isinstance(existing, list) else dict(existing)
    next_index = max((k for k in merged if isinstance(k, int)), default=-1) + 1
    items = enumerate(additional) if isinstance(additional, list) else additional.items()
    for key, cls in items:
        if isinstance(key, int):
            if cls not in merged.values():
                merged[next_index] = cls
                next_index += 1
        elif key not in merged:
            merged[key] = cls

    # Drop duplicate class names, keeping the first key that carries them
    seen = set()
    unique = {}
    for key, cls in merged.items():
        if cls not in seen:
            seen.add(cls)
            unique[key] = cls
    return unique


def add_css_class(options: dict, class_) -> None:
    """Add one or more CSS classes to the options.

    A class already present is not added again. If the existing class value is
    a dict, classes stored under a string key keep their value:

        >>> options = {'class': {'persistent': 'initial'}}
        >>> add_css_class(options, {'persistent': 'override'})
        >>> options['class']
        {'persistent': 'initial'}

    Args:
        options: Tag options to modify.
        class_: A class name, or a list/dict of class names.
    """
    if options.get('class') is None:
        options['class'] = class_
        return

    current = options['class']
    if isinstance(current, (list, dict)):
        options['class'] = _merge_css_classes(current, _as_classes(class_))
    else:
        merged = _merge_css_classes(str(current).split(), _as_classes(class_))
        values = merged.values() if isinstance(merged, dict) else merged
        options['class'] = ' '.join(values)


def remove_css_class(options: dict, class_) -> None:
    """Remove one or more CSS classes from the options.

    The "class" key is deleted when no classes are left.

    Args:
        options: Tag options to modify.
        class_: A class name, or a list of class names.
    """
    if options.get('class') is None:
        return

    removed = set(_as_classes(class_))
    current = options['class']
    if isinstance(current, dict):
        remaining = {k: v for k, v in current.items() if v not in removed}
    elif isinstance(current, list):
        remaining = [cls for cls in current if cls not in removed]
    else:
        remaining = ' '.join(cls for cls in str(current).split() if cls not in removed)

    if remaining:
        options['class'] = remaining
    else:
        del options['class']


def add_css_style(options: dict, style, overwrite: bool = True) -> None:
    """Add CSS styles to the options.

    Styles are merged with any existing "style" value. Properties present in
    both keep the old value unless overwrite is True.

    Example:
        >>> options = {'style': 'width: 100px;'}
        >>> add_css_style(options, {'height': '200px'})
        >>> options['style']
        'width: 100px; height: 200px;'

    Args:
        options: Tag options to modify.
        style: A style string ("width: 100px; height: 200px") or dict.
        overwrite: Whether new values replace existing properties.
    """
    if options.get('style'):
        old_style = options['style']
        if not isinstance(old_style, dict):
            old_style = css_style_to_dict(old_style)
        new_style = style if isinstance(style, dict) else css_style_to_dict(style)
        if not overwrite:
            new_style = {k: v for k, v in new_style.items() if k not in old_style}
        style = {**old_style, **new_style}
    options['style'] = css_style_from_dict(style) if isinstance(style, dict) else style


def remove_css_style(options: dict, properties) -> None:
    """Remove CSS properties from the options' "style" value.

    Example:
        >>> options = {'style': 'width: 100px; height: 200px;'}
        >>> remove_css_style(options, ['width', 'height'])
        >>> options['style'] is None
        True
    """
    if not options.get('style'):
        return

    style = options['style']
    style = dict(style) if isinstance(style, dict) else css_style_to_dict(style)
    if isinstance(properties, str):
        properties = [properties]
    for prop in properties:
        style.pop(prop, None)
    options['style'] = css_style_from_dict(style)


def css_style_from_dict(style: dict) -> str | None:
    """Render a dict of CSS properties as a style string.

    Returns None for an empty dict so the "style" attribute is not rendered.

    Example:
        >>> css_style_from_dict({'width': '100px', 'height': '200px'})
        'width: 100px; height: 200px;'
        >>> css_style_from_dict({}) is None
        True
    """
    result = ' '.join(f'{name}: {value};' for name, value in style.items())
    return result or None


def css_style_to_dict(style: str | None) -> dict:
    """Parse a CSS style string into a dict of properties.

    Empty declarations and trailing separators are ignored. Declarations
    without a colon or without a property name are skipped. Values may
    contain colons, as in "url(http://...)".

    Example:
        >>> css_style_to_dict('width: 100px; height: 200px;')
        {'width': '100px', 'height': '200px'}
    """
    result = {}
    if not style:
        return result
    for declaration in str(style).split(';'):
        name, sep, value = declaration.partition(':')
        name = name.strip()
        if sep and name:
            result[name] = value.strip()
        elif declaration.strip():
            logger.debug("Skipping malformed CSS declaration %r", declaration)
    return result
