"""
Attribute Validity Oracle

Answers "is this a markup attribute name?" for a keyword-argument prop name.
One compiled pattern covers the HTML attribute vocabulary, the SVG attribute
vocabulary, DOM event handlers, and the open-ended prefixed families
(`data_*`, `aria_*`, `hx_*`, `x_*`, hyphenated or not).
"""

import re
from functools import lru_cache

from .tables import SVG_PROPS

# HTML attributes in keyword spelling, fastcore aliases included
# (`cls`, `klass`, `_class`, `_for`, `fr`, `htmlFor`). Spellings that attrmap
# does not alias (`class_`, `for_`, `html_for`) would render as `class-`,
# `for-` and `html-for`, so they are not listed.
HTML_ATTRIBUTES = frozenset("""
    abbr accept accept_charset accesskey action allow allowfullscreen allowpaymentrequest alt
    async autocapitalize autocomplete autocorrect autofocus autoplay autosave capture cellpadding
    cellspacing challenge charset checked cite class _class cls klass classid color cols
    colspan content contenteditable contextmenu controls controlslist coords crossorigin datetime
    decoding default defer dir dirname disabled disablepictureinpicture disableremoteplayback
    download draggable enctype enterkeyhint fetchpriority for _for fr htmlFor form
    formaction formenctype formmethod formnovalidate formtarget frameborder headers height hidden
    high href hreflang http_equiv icon id _id imagesizes imagesrcset inert inputmode integrity is
    ismap itemid itemprop itemref itemscope itemtype key keytype kind label lang list loading loop
    low manifest marginheight marginwidth max maxlength media mediagroup method min minlength
    multiple muted name nomodule nonce novalidate open optimum part pattern ping placeholder
    playsinline popover popovertarget popovertargetaction poster preload profile radiogroup
    readonly referrerpolicy rel required reversed role rows rowspan sandbox scope scoped scrolling
    seamless selected shape size sizes slot span spellcheck src srcdoc srclang srcset start step
    style summary tabindex target title translate type usemap value width wmode wrap
""".split())

# DOM events, for lower-case handler attributes (`onclick`, `on_click`).
DOM_EVENTS = frozenset("""
    abort afterprint animationend animationiteration animationstart auxclick beforeinput
    beforeprint beforeunload blur cancel canplay canplaythrough change click close contextmenu
    copy cuechange cut dblclick drag dragend dragenter dragleave dragover dragstart drop
    durationchange emptied ended error focus focusin focusout formdata fullscreenchange
    gotpointercapture hashchange input invalid keydown keypress keyup load loadeddata
    loadedmetadata loadstart lostpointercapture message mousedown mouseenter mouseleave mousemove
    mouseout mouseover mouseup paste pause play playing pointercancel pointerdown pointerenter
    pointerleave pointermove pointerout pointerover pointerup popstate progress ratechange reset
    resize scroll scrollend search seeked seeking select selectionchange slotchange stalled
    storage submit suspend timeupdate toggle touchcancel touchend touchmove touchstart
    transitionend unload volumechange waiting wheel
""".split())


def _alternation(names) -> str:
    return "|".join(re.escape(name) for name in sorted(names, key=len, reverse=True))


_VALID_PROP = re.compile(
    rf"(?:{_alternation(HTML_ATTRIBUTES | SVG_PROPS)})"
    rf"|on_?(?:{_alternation(DOM_EVENTS)})"
    r"|on[A-Z]\w*"
    r"|(?:data|aria|hx|x)[_-][\w:.-]+"
)


@lru_cache(maxsize=1024)
def is_prop_valid(name: str) -> bool:
    """Return True when `name` is a generically valid markup attribute name."""
    return _VALID_PROP.fullmatch(name) is not None
