"""Element classification and target-format constants for SVG → VectorDrawable."""

ANDROID_NAMESPACE = "http://schemas.android.com/apk/res/android"

# Elements the shape normalizer turns into <path> leaves.
CONVERTIBLE_ELEMENTS = frozenset({"path", "rect", "circle", "polygon", "line"})

GROUP_ELEMENT = "g"

ROOT_ELEMENT = "svg"

# Elements with no VectorDrawable counterpart. Encountering one records a
# warning; its children are still walked for convertible shapes.
UNSUPPORTED_ELEMENTS = frozenset({
    # Animation
    "animate", "animateColor", "animateMotion", "animateTransform", "mpath", "set",
    # Containers
    "a", "defs", "glyph", "marker", "mask", "missing-glyph", "pattern", "switch", "symbol",
    # Filter primitives
    "feBlend", "feColorMatrix", "feComponentTransfer", "feComposite", "feConvolveMatrix",
    "feDiffuseLighting", "feDisplacementMap", "feFlood", "feFuncA", "feFuncB", "feFuncG",
    "feFuncR", "feGaussianBlur", "feImage", "feMerge", "feMergeNode", "feMorphology",
    "feOffset", "feSpecularLighting", "feTile", "feTurbulence",
    # Fonts
    "font", "font-face", "font-face-format", "font-face-name", "font-face-src",
    "font-face-uri", "hkern", "vkern",
    # Gradients
    "linearGradient", "radialGradient", "stop",
    # Graphics
    "ellipse", "polyline", "text", "use", "image",
    # Light sources
    "feDistantLight", "fePointLight", "feSpotLight",
    # Text content
    "altGlyph", "altGlyphDef", "altGlyphItem", "glyphRef", "textPath", "tref", "tspan",
    # Uncategorized
    "clipPath", "color-profile", "cursor", "filter", "foreignObject", "script", "view", "style",
})

# Dimension unit suffixes stripped before numeric parsing. "rem" before "em"
# so the longer suffix wins.
UNIT_SUFFIXES = ("px", "pt", "rem", "em", "cm", "mm", "in")

# Spaces per indentation level in the emitted XML.
INDENT_UNIT = "    "
