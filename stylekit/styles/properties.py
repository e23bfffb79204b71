"""The CSS properties that get a typed setter on Style.

Setter names are the property names in snake_case with any vendor dash
dropped (`background-color` -> `background_color`,
`-webkit-font-smoothing` -> `webkit_font_smoothing`).
"""

_BOX = """
    display box-sizing width height min-width max-width min-height max-height
    margin margin-top margin-right margin-bottom margin-left
    padding padding-top padding-right padding-bottom padding-left
    border border-width border-style border-color
    border-top border-right border-bottom border-left
    border-radius border-top-left-radius border-top-right-radius
    border-bottom-right-radius border-bottom-left-radius
    outline outline-offset outline-width outline-style outline-color
"""

_BACKGROUND = """
    background background-color background-image background-size background-position
    background-repeat background-attachment background-clip background-origin background-blend-mode
"""

_TYPOGRAPHY = """
    color font font-family font-size font-weight font-style line-height letter-spacing word-spacing
    text-align text-align-last text-decoration text-decoration-line text-decoration-color
    text-decoration-style text-decoration-thickness text-decoration-skip-ink
    text-underline-offset text-underline-position text-transform text-indent text-shadow
    text-overflow text-wrap text-wrap-mode text-wrap-style text-orientation
    text-emphasis text-emphasis-color text-emphasis-position text-emphasis-style
    white-space word-break overflow-wrap hyphens hyphenate-character tab-size
    vertical-align direction unicode-bidi writing-mode quotes
    font-variant font-variant-caps font-variant-numeric font-variant-ligatures
    font-variant-east-asian font-variant-alternates font-variant-position
    font-feature-settings font-variation-settings font-kerning font-optical-sizing
    font-stretch font-size-adjust
"""

_FLEX_GRID = """
    flex flex-direction flex-wrap flex-flow flex-grow flex-shrink flex-basis order
    justify-content justify-items justify-self align-content align-items align-self
    place-content place-items place-self gap row-gap column-gap
    grid grid-template grid-template-columns grid-template-rows grid-area
    grid-auto-columns grid-auto-rows grid-auto-flow
"""

_POSITION = """
    position top right bottom left inset z-index float clear
    overflow overflow-x overflow-y overscroll-behavior overscroll-behavior-x overscroll-behavior-y
    visibility opacity isolation mix-blend-mode
"""

_INTERACTION = """
    cursor pointer-events user-select resize touch-action appearance caret-color accent-color
    scroll-behavior scroll-snap-type scroll-snap-align scroll-snap-stop
    scroll-margin scroll-margin-top scroll-margin-right scroll-margin-bottom scroll-margin-left
    scroll-padding scroll-padding-top scroll-padding-right scroll-padding-bottom scroll-padding-left
"""

_EFFECTS = """
    transform transform-origin transform-style perspective backface-visibility
    transition-property transition-duration transition-timing-function transition-delay transition-behavior
    animation-name animation-duration animation-timing-function animation-delay
    animation-iteration-count animation-direction animation-fill-mode animation-play-state
    animation-timeline animation-composition
    box-shadow filter backdrop-filter clip-path
    mask mask-image mask-mode mask-repeat mask-position mask-size mask-origin mask-clip mask-composite mask-type
    shape-outside shape-margin shape-image-threshold will-change
    view-transition-name scroll-timeline scroll-timeline-name scroll-timeline-axis
    view-timeline view-timeline-name view-timeline-axis view-timeline-inset timeline-scope
"""

_LISTS_TABLES_MEDIA = """
    list-style list-style-type list-style-position list-style-image
    border-collapse border-spacing table-layout caption-side empty-cells
    object-fit object-position image-rendering
    counter-reset counter-increment counter-set
"""

_LOGICAL = """
    inline-size block-size min-inline-size max-inline-size min-block-size max-block-size
    margin-inline margin-inline-start margin-inline-end margin-block margin-block-start margin-block-end
    padding-inline padding-inline-start padding-inline-end padding-block padding-block-start padding-block-end
    inset-inline inset-inline-start inset-inline-end inset-block inset-block-start inset-block-end
    border-inline border-inline-start border-inline-end border-block border-block-start border-block-end
    border-start-start-radius border-start-end-radius border-end-start-radius border-end-end-radius
"""

_COLUMNS_CONTAINMENT = """
    columns column-count column-width column-rule column-rule-width column-rule-style
    column-rule-color column-span column-fill
    break-before break-after break-inside page-break-before page-break-after page-break-inside
    orphans widows
    contain content-visibility contain-intrinsic-size container-type container-name
    color-scheme forced-color-adjust print-color-adjust all
"""

# Vendor-prefixed properties are only the literal cases listed here.
_VENDOR = """
    -webkit-font-smoothing -moz-osx-font-smoothing -webkit-background-clip
    -webkit-text-fill-color -webkit-line-clamp -webkit-box-orient -webkit-tap-highlight-color
"""

PROPERTY_NAMES: tuple[str, ...] = tuple(
    " ".join(
        [_BOX, _BACKGROUND, _TYPOGRAPHY, _FLEX_GRID, _POSITION, _INTERACTION,
         _EFFECTS, _LISTS_TABLES_MEDIA, _LOGICAL, _COLUMNS_CONTAINMENT, _VENDOR]
    ).split()
)


def setter_name(property_name: str) -> str:
    """`-webkit-font-smoothing` -> `webkit_font_smoothing`"""
    return property_name.lstrip("-").replace("-", "_")


# setter name -> CSS property name
PROPERTIES: dict[str, str] = {setter_name(p): p for p in PROPERTY_NAMES}
