"""Element and attribute tables for the JSX rewriter.

The element lists back the default `ElementCatalog`. They are kept as lists to
maintain a stable iteration order; the catalog builds sets from them for
lookups.

Element names use the identifier form of the construction API: lower-case
for HTML, lower-initial camelCase for SVG (``linearGradient``, ``feBlend``).

Usage:
    from turbojsx.constants import HTML_ELEMENTS, SVG_ELEMENTS

References:
    - https://html.spec.whatwg.org/multipage/indices.html#elements-3
    - https://www.w3.org/TR/SVG11/eltindex.html
"""

# Name of the call wrapping every markup expression: jsx(div(...))
MARKUP_MARKER = "jsx"

# Module-level switches: __turbojsx__ = False
DIRECTIVE_NAMES = ("__turbojsx__", "__turbojsx_enable__")

# Selector ending a qualified tag reference: Html.Div.createElement(...)
CONSTRUCTOR_SELECTOR = "createElement"

# Keyword carrying the child list of a tag
CHILDREN_LABEL = "children"

# Keyword carrying the attribute list in emitted calls
ATTRIBUTES_LABEL = "a"

# Construction function for text children
TEXT_ELEMENT = "txt"

# Prefix of attribute construction functions: a_class, a_aria_label
ATTRIBUTE_PREFIX = "a_"

# Default module names used in emitted calls, keyed by namespace token
MODULE_NAMES = {
    "html": "Html",
    "svg": "Svg",
}

# Exact attribute renames, checked before the prefix rule. The trailing
# underscore forms are Python keywords or names shadowed by the API.
ATTRIBUTE_ALIASES = {
    "className": "class",
    "htmlFor": "for",
    "class_": "class",
    "for_": "for",
    "type_": "type",
    "to_": "to",
    "open_": "open",
    "begin_": "begin",
    "end_": "end",
    "in_": "in",
    "method_": "method",
    "async_": "async",
}

# ariaLabel -> aria-label, dataFoo -> data-foo
KEBAB_CASE_PREFIXES = ("aria", "data")

# SVG elements the HTML module can embed directly: Html.svg(...)
HTML_EMBEDDED_SVG_ELEMENTS = [
    "svg",
]

# Elements without content
VOID_ELEMENTS = [
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
]

HTML_ELEMENTS = [
    "a",
    "abbr",
    "address",
    "area",
    "article",
    "aside",
    "audio",
    "b",
    "base",
    "bdi",
    "bdo",
    "blockquote",
    "body",
    "br",
    "button",
    "canvas",
    "caption",
    "cite",
    "code",
    "col",
    "colgroup",
    "data",
    "datalist",
    "dd",
    "del",
    "details",
    "dfn",
    "dialog",
    "div",
    "dl",
    "dt",
    "em",
    "embed",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hgroup",
    "hr",
    "html",
    "i",
    "iframe",
    "img",
    "input",
    "ins",
    "kbd",
    "label",
    "legend",
    "li",
    "link",
    "main",
    "map",
    "mark",
    "menu",
    "meta",
    "meter",
    "nav",
    "noscript",
    "object",
    "ol",
    "optgroup",
    "option",
    "output",
    "p",
    "param",
    "picture",
    "pre",
    "progress",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "script",
    "section",
    "select",
    "slot",
    "small",
    "source",
    "span",
    "strong",
    "style",
    "sub",
    "summary",
    "sup",
    "table",
    "tbody",
    "td",
    "template",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "time",
    "title",
    "tr",
    "track",
    "u",
    "ul",
    "var",
    "video",
    "wbr",
]

# Lower-case tag name to API identifier, for SVG elements whose name carries
# upper-case letters.
SVG_CASE_SENSITIVE_ELEMENTS = {
    "foreignobject": "foreignObject",
    "animatemotion": "animateMotion",
    "animatetransform": "animateTransform",
    "clippath": "clipPath",
    "feblend": "feBlend",
    "fecolormatrix": "feColorMatrix",
    "fecomponenttransfer": "feComponentTransfer",
    "fecomposite": "feComposite",
    "feconvolvematrix": "feConvolveMatrix",
    "fediffuselighting": "feDiffuseLighting",
    "fedisplacementmap": "feDisplacementMap",
    "fedistantlight": "feDistantLight",
    "fedropshadow": "feDropShadow",
    "feflood": "feFlood",
    "fefunca": "feFuncA",
    "fefuncb": "feFuncB",
    "fefuncg": "feFuncG",
    "fefuncr": "feFuncR",
    "fegaussianblur": "feGaussianBlur",
    "feimage": "feImage",
    "femerge": "feMerge",
    "femergenode": "feMergeNode",
    "femorphology": "feMorphology",
    "feoffset": "feOffset",
    "fepointlight": "fePointLight",
    "fespecularlighting": "feSpecularLighting",
    "fespotlight": "feSpotLight",
    "fetile": "feTile",
    "feturbulence": "feTurbulence",
    "lineargradient": "linearGradient",
    "radialgradient": "radialGradient",
    "textpath": "textPath",
    "altglyph": "altGlyph",
    "altglyphdef": "altGlyphDef",
    "altglyphitem": "altGlyphItem",
    "animatecolor": "animateColor",
    "glyphref": "glyphRef",
}

SVG_ELEMENTS = [
    "a",
    "animate",
    "circle",
    "defs",
    "desc",
    "ellipse",
    "filter",
    "g",
    "image",
    "line",
    "marker",
    "mask",
    "metadata",
    "mpath",
    "path",
    "pattern",
    "polygon",
    "polyline",
    "rect",
    "script",
    "set",
    "stop",
    "style",
    "svg",
    "switch",
    "symbol",
    "text",
    "title",
    "tspan",
    "use",
    "view",
    *SVG_CASE_SENSITIVE_ELEMENTS.values(),
]
