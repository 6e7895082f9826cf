"""
StarStyle - Styled components for FastHTML

Style shorthand props, pseudo props and ad-hoc `css` overrides compiled into
classes, with only valid HTML attributes forwarded to the rendered element.
"""

from .config import Environment, StyleConfig, configure, get_config
from .exceptions import StarStyleError, PropTableError, StyleCompileError
from .compiler import (
    StyleSheet, sheet, css, cx, merge, keyframes, inject_global,
    get_registered_styles, hydrate, flush
)
from .props import (
    PropKind, ValueKind, SplitProps,
    classify, forward_html_props, is_prop_valid, split_props, compile_split
)
from .ui import ElementTarget, ComponentTarget, Ref, create_ref, render
from .styled import StyledComponent, Styled, styled, create_styled

__all__ = [
    # Configuration
    'Environment',
    'StyleConfig',
    'configure',
    'get_config',

    # Errors
    'StarStyleError',
    'PropTableError',
    'StyleCompileError',

    # Style compiler
    'StyleSheet',
    'sheet',
    'css',
    'cx',
    'merge',
    'keyframes',
    'inject_global',
    'get_registered_styles',
    'hydrate',
    'flush',

    # Prop routing
    'PropKind',
    'ValueKind',
    'SplitProps',
    'classify',
    'forward_html_props',
    'is_prop_valid',
    'split_props',
    'compile_split',

    # Rendering
    'ElementTarget',
    'ComponentTarget',
    'Ref',
    'create_ref',
    'render',

    # Styled components
    'StyledComponent',
    'Styled',
    'styled',
    'create_styled',
]
