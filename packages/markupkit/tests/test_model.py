"""Test the pydantic-backed FormModel."""

import pytest
from pydantic import Field

from markupkit.model import FormModel, Model, generate_attribute_label


class Signup(FormModel):
    username: str = Field(min_length=3, max_length=16)
    age: int


class TestFormModel:
    """FormModel implements the Model protocol on pydantic fields."""

    def test_is_a_model(self, post):
        """FormModel satisfies the Model protocol."""
        assert isinstance(post, Model)

    def test_form_name(self, post, anonymous):
        """The form name defaults to the class name."""
        assert post.form_name() == 'Post'
        assert anonymous.form_name() == ''

    def test_labels(self, post):
        """Labels come from the field title or the attribute name."""
        assert post.get_attribute_label('title') == 'Post title'
        assert post.get_attribute_label('body') == 'Body'

    def test_hints(self, post):
        """Hints come from the field description."""
        assert post.get_attribute_hint('title') == 'Keep it short.'
        assert post.get_attribute_hint('body') == ''
        assert post.get_attribute_hint('missing') == ''

    def test_validators(self, post):
        """Field constraints are exposed as validators."""
        validators = post.get_active_validators('title')
        assert [v.max_length for v in validators if hasattr(v, 'max_length')] == [64]
        assert post.get_active_validators('missing') == []

    def test_errors(self, post):
        """Errors are kept, summarized and cleared per attribute."""
        assert not post.has_errors()
        post.add_error('title', 'Too long.')
        post.add_error('title', 'Not unique.')
        post.add_error('body', 'Required.')
        assert post.has_errors()
        assert post.has_errors('title')
        assert not post.has_errors('tags')
        assert post.get_first_error('title') == 'Too long.'
        assert post.get_first_error('tags') is None
        assert post.get_errors('title') == ['Too long.', 'Not unique.']
        assert post.get_error_summary(False) == ['Too long.', 'Required.']
        assert post.get_error_summary(True) == ['Too long.', 'Not unique.', 'Required.']
        post.clear_errors('title')
        assert post.get_errors() == {'body': ['Required.']}
        post.clear_errors()
        assert not post.has_errors()


class TestFromInput:
    """FormModel.from_input() keeps validation errors per attribute."""

    def test_valid_input(self):
        """Valid input builds a model without errors."""
        form = Signup.from_input({'username': 'alice', 'age': 30})
        assert form.username == 'alice'
        assert not form.has_errors()

    def test_invalid_input(self):
        """Invalid input keeps the raw values and the messages."""
        form = Signup.from_input({'username': 'al', 'age': 'old', 'extra': 1})
        assert form.username == 'al'
        assert form.has_errors('username')
        assert form.has_errors('age')
        assert 'at least 3 characters' in form.get_first_error('username')

    def test_missing_input(self):
        """Missing required fields are reported."""
        form = Signup.from_input({})
        assert form.has_errors('username')
        assert getattr(form, 'username', None) is None


@pytest.mark.parametrize('name, label', [
    ('title', 'Title'),
    ('first_name', 'First Name'),
    ('postCode', 'Post Code'),
    ('user-id', 'User Id'),
    ('a.b', 'A B'),
])
def test_generate_attribute_label(name, label):
    """Attribute names become capitalized words."""
    assert generate_attribute_label(name) == label
