"""
Prop Tables

Static lookup data for prop routing. Everything here is built once at
import time and never mutated afterwards.

Names are keyword-argument spellings, the same ones fastcore's `attrmap`
turns into markup attributes: `stroke_width` renders as `stroke-width`,
camelCase SVG attributes such as `viewBox` render unchanged, and names that
cannot be keywords (`xlink:href`) are passed through a mapping.

For a list of valid HTML attributes, and their valid elements, see
https://developer.mozilla.org/en-US/docs/Web/HTML/Attributes
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

from ..exceptions import PropTableError


def _names(names: str) -> FrozenSet[str]:
    return frozenset(names.split())


# HTML elements that accept width and height attributes.
# table, th and td are deprecated users of it, the CSS width property should be used instead.
WIDTH_AND_HEIGHT_ELEMENTS = _names("canvas embed img iframe input object video table th td")

# SVG elements, lower-cased: markup element names are matched case-insensitively.
# https://developer.mozilla.org/en-US/docs/Web/SVG/Element
SVG_ELEMENTS = frozenset(name.lower() for name in """
    altGlyph altGlyphDef animate animateColor animateMotion animateTransform circle clipPath
    colorProfile cursor defs desc ellipse feBlend feColorMatrix feComponentTransfer feComposite
    feConvolveMatrix feDiffuseLighting feDisplacementMap feDropShadow feFlood feFuncA feFuncB
    feFuncG feFuncR feGaussianBlur feImage feMerge feMergeNode feMorphology feOffset fePointLight
    feSpecularLighting feSpotLight feTile feTurbulence filter foreignObject g glyph glyphRef image
    line linearGradient marker mask metadata missingGlyph mpath path pattern polygon polyline
    radialGradient rect script set stop svg switch symbol text textPath title tref tspan use view
""".split())

# Valid HTML attributes in some sense, but never safe to forward to a base element.
DISALLOWED_PROPS = frozenset({
    # Not a valid HTML attribute.
    "dashed",
    # Only available for iframes, and not supported by any browser.
    "seamless",
    # Only used by <option>. Set the value on <select> instead.
    "selected",
})

# Interaction state flags used by hit-area widgets. Not HTML attributes.
HIT_AREA_PROPS = _names("active focus hover keyboard_focus")

# HTML attributes that are only valid for a tiny subset of elements.
# Names absent from this table are not restricted by it.
NON_STANDARD_PROPS: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "action": _names("form"),
    # Safari pinned tabs only, for <link>. Common in CSS-in-Python props.
    "color": _names("link"),
    "height": SVG_ELEMENTS | WIDTH_AND_HEIGHT_ELEMENTS,
    "label": _names("optgroup option track"),
    "loading": _names("img iframe"),
    "open": _names("details dialog"),
    "size": _names("input select"),
    "width": SVG_ELEMENTS | WIDTH_AND_HEIGHT_ELEMENTS,
    # Also a common layout variant name.
    "wrap": _names("textarea"),
})

# Attributes for SVG elements only. The check is naive: azimuth, for example,
# is only valid on a handful of filter primitives.
# https://developer.mozilla.org/en-US/docs/Web/SVG/Attribute
SVG_PROPS = _names("""
    accent_height accumulate additive alignment_baseline allowReorder alphabetic amplitude
    arabic_form ascent attributeName attributeType autoReverse azimuth baseFrequency
    baseline_shift baseProfile bbox begin bias by calcMode cap_height clip clipPathUnits
    clip_path clip_rule color_interpolation color_interpolation_filters color_profile
    color_rendering contentScriptType contentStyleType cursor cx cy d decelerate descent
    diffuseConstant direction display divisor dominant_baseline dur dx dy edgeMode elevation
    enable_background end exponent externalResourcesRequired fill fill_opacity fill_rule filter
    filterRes filterUnits flood_color flood_opacity focusable font_family font_size
    font_size_adjust font_stretch font_style font_variant font_weight format from _from fx fy
    g1 g2 glyph_name glyph_orientation_horizontal glyph_orientation_vertical glyphRef
    gradientTransform gradientUnits hanging horiz_adv_x horiz_origin_x ideographic
    image_rendering in _in in2 intercept k k1 k2 k3 k4 kernelMatrix kernelUnitLength kerning
    keyPoints keySplines keyTimes lengthAdjust letter_spacing lighting_color limitingConeAngle
    local marker_end marker_mid marker_start markerHeight markerUnits markerWidth mask
    maskContentUnits maskUnits mathematical mode numOctaves offset opacity operator order orient
    orientation origin overflow overline_position overline_thickness panose_1 paint_order
    pathLength patternContentUnits patternTransform patternUnits pointer_events points pointsAtX
    pointsAtY pointsAtZ preserveAlpha preserveAspectRatio primitiveUnits r radius refX refY
    rendering_intent repeatCount repeatDur requiredExtensions requiredFeatures restart result
    rotate rx ry scale seed shape_rendering slope spacing specularConstant specularExponent speed
    spreadMethod startOffset stdDeviation stemh stemv stitchTiles stop_color stop_opacity
    strikethrough_position strikethrough_thickness string stroke stroke_dasharray
    stroke_dashoffset stroke_linecap stroke_linejoin stroke_miterlimit stroke_opacity
    stroke_width surfaceScale systemLanguage tableValues targetX targetY text_anchor
    text_decoration text_rendering textLength to transform u1 u2 underline_position
    underline_thickness unicode unicode_bidi unicode_range units_per_em v_alphabetic v_hanging
    v_ideographic v_mathematical values vector_effect version vert_adv_y vert_origin_x
    vert_origin_y viewBox viewTarget visibility widths word_spacing writing_mode x x_height x1 x2
    xChannelSelector xlink:actuate xlink:arcrole xlink:href xlink:role xlink:show xlink:title
    xlink:type xml:base xmlns xmlns:xlink xml:lang xml:space y y1 y2 yChannelSelector z zoomAndPan
""")

# CSS properties accepted as style shorthand props.
# Non-native shortcut props (e.g. `m` or `mx`) are omitted here.
CSS_PROPS = _names("""
    background background_image background_size background_position background_repeat

    border border_bottom border_bottom_color border_bottom_left_radius border_bottom_right_radius
    border_bottom_style border_bottom_width border_color border_left border_left_color
    border_left_style border_left_width border_radius border_right border_right_color
    border_right_style border_right_width border_spacing border_style border_top border_top_color
    border_top_left_radius border_top_right_radius border_top_style border_top_width border_width

    background_color color opacity

    align_content align_items align_self flex flex_basis flex_direction flex_grow flex_shrink
    flex_wrap justify_content justify_items justify_self order

    gap row_gap column_gap grid_area grid_auto_columns grid_auto_flow grid_auto_rows grid_column
    grid_column_gap grid_gap grid_row grid_row_gap grid_template_areas grid_template_columns
    grid_template_rows

    width display height max_height max_width min_height min_width overflow overflow_x overflow_y
    vertical_align

    bottom left position right top z_index

    box_shadow text_shadow

    margin margin_bottom margin_left margin_right margin_top
    padding padding_bottom padding_left padding_right padding_top

    font_family font_size font_style font_weight letter_spacing line_height text_align

    animation appearance box_sizing content cursor fill float object_fit object_position outline
    overflow_wrap pointer_events resize stroke text_overflow transform transform_origin transition
    user_select visibility white_space
""")

# Pseudo props and the selector (or at-rule) template each one compiles under.
# Non-native selectors (e.g. [data-selected]) are omitted here.
PSEUDO_PROPS: Mapping[str, str] = MappingProxyType({
    "_active": "&:active",
    "_active_link": "&[aria-current=page]",
    "_active_step": "&[aria-current=step]",
    "_after": "&:after",
    "_autofill": "&:-webkit-autofill",
    "_before": "&:before",
    "_disabled": "&[disabled]",
    "_empty": "&:empty",
    "_even": "&:nth-of-type(even)",
    "_expanded": "&[aria-expanded=true]",
    "_first": "&:first-of-type",
    "_focus": "&:focus",
    "_focus_visible": "&:focus-visible",
    "_focus_within": "&:focus-within",
    "_full_screen": "&:fullscreen",
    "_grabbed": "&[aria-grabbed=true]",
    "_group_active": "[role=group]:active &",
    "_group_checked": "[role=group]:checked &",
    "_group_disabled": "[role=group]:disabled &",
    "_group_focus": "[role=group]:focus &",
    "_group_focus_visible": "[role=group]:focus-visible &",
    "_group_focus_within": "[role=group]:focus-within &",
    "_group_hover": "[role=group]:hover &",
    "_group_invalid": "[role=group]:invalid &",
    "_hidden": "&[hidden]",
    "_hover": "&:hover",
    "_indeterminate": "&:indeterminate, &[aria-checked=mixed]",
    "_invalid": "&[aria-invalid=true]",
    "_last": "&:last-of-type",
    "_loading": "&[aria-busy=true]",
    "_ltr": "[dir=ltr] &, &[dir=ltr]",
    "_media_dark": "@media (prefers-color-scheme: dark)",
    "_media_reduce_motion": "@media (prefers-reduced-motion: reduce)",
    "_not_first": "&:not(:first-of-type)",
    "_not_last": "&:not(:last-of-type)",
    "_odd": "&:nth-of-type(odd)",
    "_placeholder": "&::placeholder",
    "_placeholder_shown": "&:placeholder-shown",
    "_pressed": "&[aria-pressed=true]",
    "_read_only": "&[readonly], &[aria-readonly=true]",
    "_rtl": "[dir=rtl] &, &[dir=rtl]",
    "_selected": "&[aria-selected=true]",
    "_selection": "&::selection",
    "_valid": "&[aria-valid=true]",
    "_visited": "&:visited",
})


def is_svg_element(element: str) -> bool:
    return element.lower() in SVG_ELEMENTS


def is_valid_for_element(name: str, element: str) -> bool:
    """
    Check a prop name against the element-specific tables for a base element.

    Only the context rules are applied here, in order: restricted names whose
    allow-set lacks the element, hit-area flags, disallowed names, then
    SVG-only names on non-SVG elements. Generic attribute validity is the
    oracle's job.
    """
    element = element.lower()
    allowed = NON_STANDARD_PROPS.get(name)
    if allowed is not None and element not in allowed:
        return False
    if name in HIT_AREA_PROPS:
        return False
    if name in DISALLOWED_PROPS:
        return False
    if name in SVG_PROPS and element not in SVG_ELEMENTS:
        return False
    return True


def check_tables() -> None:
    """Verify the tables are consistent. Raises PropTableError on the first conflict."""
    overlap = CSS_PROPS.intersection(PSEUDO_PROPS)
    if overlap:
        raise PropTableError(f"Props classified as both style and pseudo: {sorted(overlap)}")

    overlap = DISALLOWED_PROPS.intersection(NON_STANDARD_PROPS)
    if overlap:
        raise PropTableError(f"Props both disallowed and conditionally allowed: {sorted(overlap)}")

    for name, template in PSEUDO_PROPS.items():
        if not template or not ("&" in template or template.startswith("@")):
            raise PropTableError(f"Pseudo prop {name} has an unusable selector template: {template!r}")


check_tables()
