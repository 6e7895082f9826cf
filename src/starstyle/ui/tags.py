"""
Element vocabulary for styled shortcuts (`styled.div`, `styled.circle`) and
for rendering void elements.
"""

from ..props.tables import SVG_ELEMENTS

html_tags = ['a', 'p', 'i', 'b', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'div', 'span', 'pre', 'blockquote', 'q', 'ul', 'ol', 'li', 'dl', 'dt', 'dd', 'table', 'thead', 'tbody', 'tfoot', 'tr', 'th', 'td', 'caption', 'form', 'label', 'select', 'option', 'optgroup', 'textarea', 'button', 'fieldset', 'legend', 'article', 'section', 'nav', 'aside', 'header', 'footer', 'main', 'figure', 'figcaption', 'strong', 'em', 'mark', 'code', 'samp', 'kbd', 'var', 'time', 'abbr', 'dfn', 'sub', 'sup', 'small', 'audio', 'video', 'picture', 'canvas', 'iframe', 'object', 'details', 'summary', 'dialog', 'noscript', 'template', 'progress', 'meter', 'output']
self_closing_tags = ['area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link', 'meta', 'param', 'source', 'track', 'wbr']

VOID_ELEMENTS = frozenset(self_closing_tags)
KNOWN_TAGS = frozenset(html_tags) | VOID_ELEMENTS | SVG_ELEMENTS


def is_void_element(name: str) -> bool:
    return name.lower() in VOID_ELEMENTS


def is_known_tag(name: str) -> bool:
    return name.lower() in KNOWN_TAGS
