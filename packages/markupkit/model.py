"""Data-model collaborators for the active builders.

The active builders only need the small Model protocol below. FormModel
implements it on top of pydantic: labels come from Field(title=...), hints
from Field(description=...), and validation errors are kept per attribute.

Usage:
    class Signup(FormModel):
        username: str = Field(title="User name", max_length=32)
        email: str = ""

    form = Signup.from_input({"username": ""})
    active_text_input(form, "username", {"maxlength": True})
"""

import re
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, PrivateAttr, ValidationError

__all__ = [
    'Model',
    'HasPrimaryKey',
    'FormModel',
    'generate_attribute_label',
]

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


@runtime_checkable
class Model(Protocol):
    """What the active builders read from a model.

    Attribute values are read with getattr(model, name).
    """

    def form_name(self) -> str: ...

    def get_attribute_label(self, attribute: str) -> str: ...

    def get_attribute_hint(self, attribute: str) -> str: ...

    def get_first_error(self, attribute: str) -> str | None: ...

    def get_error_summary(self, show_all_errors: bool) -> list[str]: ...

    def get_active_validators(self, attribute: str) -> list: ...


@runtime_checkable
class HasPrimaryKey(Protocol):
    """A record whose primary key stands in for it as an input value."""

    def get_primary_key(self) -> Any: ...


def generate_attribute_label(name: str) -> str:
    """Turn an attribute name into a label.

    Example:
        >>> generate_attribute_label('first_name')
        'First Name'
        >>> generate_attribute_label('postCode')
        'Post Code'
    """
    words = _CAMEL_BOUNDARY.sub(' ', name)
    words = re.sub(r'[-_.]+', ' ', words)
    return ' '.join(w.capitalize() for w in words.split())


class FormModel(BaseModel):
    """A pydantic model usable with the active builders.

    Set __form_name__ to change the input name prefix; an empty string gives
    bare attribute names ("email" instead of "Signup[email]").
    """

    __form_name__: ClassVar[str | None] = None

    _errors: dict[str, list[str]] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_input(cls, data: dict):
        """Validate submitted data.

        On failure the model is built from the raw data without validation and
        carries the error messages, so a form can be re-rendered with them.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            known = {k: v for k, v in data.items() if k in cls.model_fields}
            model = cls.model_construct(**known)
            for error in e.errors():
                field = str(error['loc'][0]) if error['loc'] else ''
                model.add_error(field, error['msg'])
            return model

    def form_name(self) -> str:
        if self.__form_name__ is not None:
            return self.__form_name__
        return type(self).__name__

    def get_attribute_label(self, attribute: str) -> str:
        field = type(self).model_fields.get(attribute)
        if field is not None and field.title:
            return field.title
        return generate_attribute_label(attribute)

    def get_attribute_hint(self, attribute: str) -> str:
        field = type(self).model_fields.get(attribute)
        if field is None or not field.description:
            return ''
        return field.description

    def get_active_validators(self, attribute: str) -> list:
        field = type(self).model_fields.get(attribute)
        if field is None:
            return []
        return list(field.metadata)

    # Errors

    def add_error(self, attribute: str, message: str) -> None:
        self._errors.setdefault(attribute, []).append(message)

    def has_errors(self, attribute: str | None = None) -> bool:
        if attribute is None:
            return bool(self._errors)
        return bool(self._errors.get(attribute))

    def get_errors(self, attribute: str | None = None):
        if attribute is None:
            return {k: list(v) for k, v in self._errors.items()}
        return list(self._errors.get(attribute, []))

    def get_first_error(self, attribute: str) -> str | None:
        errors = self._errors.get(attribute)
        return errors[0] if errors else None

    def get_error_summary(self, show_all_errors: bool) -> list[str]:
        lines = []
        for messages in self._errors.values():
            lines.extend(messages if show_all_errors else messages[:1])
        return lines

    def clear_errors(self, attribute: str | None = None) -> None:
        if attribute is None:
            self._errors.clear()
        else:
            self._errors.pop(attribute, None)
