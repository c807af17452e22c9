"""
Configuration for markupkit.

Runtime settings are read from the environment once at import time. The
rendering tables below are process-wide constants shared by every builder.
"""
import os
import re
from dataclasses import dataclass


@dataclass
class Settings:
    """Markup configuration"""

    # Character set announced by generated markup
    CHARSET: str = "UTF-8"

    # Replace spaces in <option> text with &nbsp; unless overridden per call
    ENCODE_SPACES: bool = False

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(f"MARKUPKIT_{key}")
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                else:
                    setattr(self, key, env_value)


# Global settings instance
settings = Settings()


# Elements that never take content or a closing tag
# http://www.w3.org/TR/html-markup/syntax.html#void-element
VOID_ELEMENTS = frozenset({
    'area',
    'base',
    'br',
    'col',
    'command',
    'embed',
    'hr',
    'img',
    'input',
    'keygen',
    'link',
    'meta',
    'param',
    'source',
    'track',
    'wbr',
})

# Preferred attribute order in rendered tags
ATTRIBUTE_ORDER = (
    'type',
    'id',
    'class',
    'name',
    'value',

    'href',
    'src',
    'srcset',
    'form',
    'action',
    'method',

    'selected',
    'checked',
    'readonly',
    'disabled',
    'multiple',

    'size',
    'maxlength',
    'width',
    'height',
    'rows',
    'cols',

    'alt',
    'title',
    'rel',
    'media',
)

# Attributes whose dict values expand to name-key="value" pairs
DATA_ATTRIBUTES = ('data', 'data-ng', 'ng')

# [prefix]name[suffix] attribute expressions, e.g. "[0]dates[0]"
ATTRIBUTE_PATTERN = re.compile(r'(^|.*\])([\w.+]+)(\[.*|$)')
