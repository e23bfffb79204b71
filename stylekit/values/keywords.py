"""Named CSS keyword values.

Each entry renders a fixed string. Entries are `name` (rendered with dashes in
place of underscores, trailing underscore dropped) or `name=text` where the
CSS text differs from the Python name.
"""

from .base import values_from_table

_DISPLAY = "block inline inline_block flex inline_flex grid inline_grid contents flow_root table table_cell table_row list_item"
_POSITION = "relative absolute fixed sticky static_"
_FLEX = "row row_reverse column column_reverse wrap nowrap wrap_reverse"
_ALIGN = "center flex_start flex_end start end space_between space_around space_evenly stretch baseline"
_BORDER = "solid dashed dotted double_ groove ridge inset outset hidden"
_TEXT = (
    "left right justify underline overline line_through uppercase lowercase capitalize "
    "normal bold bolder lighter italic oblique ellipsis"
)
_OVERFLOW = "visible scroll clip"
_CURSOR = (
    "pointer default=default crosshair move text wait help not_allowed grab grabbing "
    "zoom_in zoom_out col_resize row_resize progress"
)
_WHITESPACE = "collapse pre pre_wrap pre_line break_spaces break_all keep_all break_word anywhere balance pretty"
_FIT = "fill contain cover scale_down"
_BACKGROUND = "bg_contain=contain bg_cover=cover bg_repeat=repeat repeat_x repeat_y no_repeat space round local border_box content_box padding_box text_clip=text"
_LIST = "disc list_circle=circle list_square=square decimal lower_alpha upper_alpha lower_roman upper_roman inside outside"
_TIMING = "ease ease_in ease_out ease_in_out linear step_start step_end"
_MISC = (
    "both horizontal vertical all_=all select_none=none select_text=text select_all=all "
    "smooth manipulation antialiased grayscale_smoothing=grayscale optimize_legibility=optimizeLegibility "
    "isolate multiply screen overlay darken_blend=darken lighten_blend=lighten "
    "inline_size size layout paint strict light dark "
    "mandatory proximity x_axis=x y_axis=y"
)

KEYWORDS = values_from_table(
    " ".join([_DISPLAY, _POSITION, _FLEX, _ALIGN, _BORDER, _TEXT, _OVERFLOW, _CURSOR,
              _WHITESPACE, _FIT, _BACKGROUND, _LIST, _TIMING, _MISC])
)

globals().update(KEYWORDS)

__all__ = list(KEYWORDS)
