"""Test CSS class and style helpers."""

import pytest

from markupkit.css import (
    add_css_class,
    add_css_style,
    css_style_from_dict,
    css_style_to_dict,
    remove_css_class,
    remove_css_style,
)


class TestAddCssClass:
    """add_css_class() merges classes without duplicates."""

    def test_sets_missing_class(self):
        """A class is set as given when the options have none."""
        options = {}
        add_css_class(options, 'a')
        assert options == {'class': 'a'}

    def test_appends_to_string(self):
        """A new class is appended to a space-separated string."""
        options = {'class': 'a b'}
        add_css_class(options, 'c')
        assert options['class'] == 'a b c'

    def test_does_not_duplicate(self):
        """A class already present is not added again."""
        options = {'class': 'a b c'}
        add_css_class(options, 'b')
        assert options['class'] == 'a b c'

    def test_space_separated_argument(self):
        """Several classes in one string are added one by one."""
        options = {'class': 'a b'}
        add_css_class(options, 'b c')
        assert options['class'] == 'a b c'

    def test_space_separated_argument_to_list(self):
        """A class string is split before merging into a list."""
        options = {'class': ['x']}
        add_css_class(options, 'x y')
        assert options['class'] == ['x', 'y']

    def test_normalizes_whitespace(self):
        """Extra whitespace in the existing class string is dropped."""
        options = {'class': '  a   b '}
        add_css_class(options, ['c', 'a'])
        assert options['class'] == 'a b c'

    def test_appends_to_list(self):
        """A class list stays a list."""
        options = {'class': ['a']}
        add_css_class(options, ['b', 'a'])
        assert options['class'] == ['a', 'b']

    def test_named_classes_keep_existing_value(self):
        """An existing named class wins over an addition with the same key."""
        options = {'class': {'persistent': 'initial'}}
        add_css_class(options, {'persistent': 'override'})
        assert options['class'] == {'persistent': 'initial'}

    def test_named_classes_merge_with_positional(self):
        """Positional classes get integer keys next to named ones."""
        options = {'class': ['a']}
        add_css_class(options, {'size': 'lg'})
        assert options['class'] == {0: 'a', 'size': 'lg'}

    def test_named_duplicate_is_dropped(self):
        """A positional class already stored under a name is not repeated."""
        options = {'class': {'base': 'btn'}}
        add_css_class(options, ['btn', 'active'])
        assert options['class'] == {'base': 'btn', 0: 'active'}


class TestRemoveCssClass:
    """remove_css_class() removes classes and drops an empty class key."""

    def test_removes_from_string(self):
        """One class is removed from a class string."""
        options = {'class': 'a b c'}
        remove_css_class(options, 'b')
        assert options['class'] == 'a c'

    def test_removes_space_separated_argument(self):
        """Every class in a space-separated argument is removed."""
        options = {'class': 'a b c'}
        remove_css_class(options, 'a b')
        assert options['class'] == 'c'

    def test_removes_several(self):
        """A list of classes is removed from a class list."""
        options = {'class': ['a', 'b', 'c']}
        remove_css_class(options, ['a', 'c'])
        assert options['class'] == ['b']

    def test_removes_named(self):
        """Named classes are removed by value."""
        options = {'class': {'base': 'btn', 'size': 'lg'}}
        remove_css_class(options, 'lg')
        assert options['class'] == {'base': 'btn'}

    def test_deletes_empty_class(self):
        """The class key is deleted when nothing is left."""
        options = {'class': 'a', 'id': 'x'}
        remove_css_class(options, 'a')
        assert options == {'id': 'x'}

    def test_missing_class_is_noop(self):
        """Options without a class are left alone."""
        options = {'id': 'x'}
        remove_css_class(options, 'a')
        assert options == {'id': 'x'}


class TestCssStyle:
    """Style string/dict conversion and merging."""

    def test_from_dict(self):
        """A dict becomes 'name: value;' declarations."""
        assert css_style_from_dict({'width': '100px', 'height': '200px'}) == 'width: 100px; height: 200px;'

    def test_from_empty_dict_is_none(self):
        """An empty dict gives None so no style attribute is rendered."""
        assert css_style_from_dict({}) is None

    def test_to_dict(self):
        """A style string is parsed into properties."""
        assert css_style_to_dict('width: 100px; height: 200px;') == {'width': '100px', 'height': '200px'}

    @pytest.mark.parametrize('style', ['', None, ';', ' ; ; '])
    def test_to_dict_empty(self, style):
        """Empty styles and bare separators give an empty dict."""
        assert css_style_to_dict(style) == {}

    def test_to_dict_skips_malformed(self):
        """Declarations without a colon are skipped."""
        assert css_style_to_dict('color red; width:1px;;') == {'width': '1px'}

    def test_to_dict_skips_empty_names(self):
        """Declarations without a property name are skipped."""
        assert css_style_to_dict(': x; color: red') == {'color': 'red'}

    def test_to_dict_keeps_colons_in_values(self):
        """Only the first colon separates name and value."""
        assert css_style_to_dict('background: url(http://example.com/a.png);') == {
            'background': 'url(http://example.com/a.png)',
        }

    @pytest.mark.parametrize('style', [
        {'width': '100px'},
        {'width': '100px', 'font-size': '12px', 'color': 'red'},
        {'background': 'url(http://example.com/a.png)', 'color': 'red'},
    ])
    def test_round_trip(self, style):
        """Parsing a rendered style gives back the original dict."""
        assert css_style_to_dict(css_style_from_dict(style)) == style

    def test_add_to_empty(self):
        """A style dict is rendered when there is no style yet."""
        options = {}
        add_css_style(options, {'width': '100px'})
        assert options['style'] == 'width: 100px;'

    def test_add_string_to_empty_keeps_string(self):
        """A style string is stored as given when there is no style yet."""
        options = {}
        add_css_style(options, 'width: 100px; height: 200px')
        assert options['style'] == 'width: 100px; height: 200px'

    def test_add_overwrites(self):
        """New values replace existing properties by default."""
        options = {'style': 'width: 100px; height: 200px;'}
        add_css_style(options, 'width: 50px; color: red')
        assert options['style'] == 'width: 50px; height: 200px; color: red;'

    def test_add_without_overwrite(self):
        """With overwrite=False existing properties keep their values."""
        options = {'style': {'width': '100px'}}
        add_css_style(options, {'width': '50px', 'color': 'red'}, overwrite=False)
        assert options['style'] == 'width: 100px; color: red;'

    def test_remove(self):
        """A single property is removed."""
        options = {'style': 'width: 100px; height: 200px;'}
        remove_css_style(options, 'width')
        assert options['style'] == 'height: 200px;'

    def test_remove_all(self):
        """Removing every property leaves style None."""
        options = {'style': {'width': '100px', 'height': '200px'}}
        remove_css_style(options, ['width', 'height'])
        assert options['style'] is None
