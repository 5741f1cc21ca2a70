"""chat-utils — formatting, template and statistics helpers for chat UIs.

The two substantial pieces are the message-template variable engine
(:mod:`chat_utils.core.variables`) and the quantile estimator
(:mod:`chat_utils.core.quantiles`).  The public helpers are re-exported
here; timer and date helpers come from :mod:`chat_utils.api` with the
system clock and thread scheduler as defaults.
"""

from chat_utils.api import create_typing_indicator, debounce, format_date
from chat_utils.core.formatting import (
    convert_seconds_to_time_unit,
    format_time,
    get_contrasting_text_color,
    parse_boolean,
    trim_content,
)
from chat_utils.core.quantiles import (
    clamp,
    quantile,
    quantile_intervals,
    quantile_of_sorted,
    sort_ascending,
)
from chat_utils.core.timers import TypingIndicator
from chat_utils.core.variables import (
    build_variable_map,
    find_undefined_variables,
    replace_variables,
)
from chat_utils.exceptions import ChatUtilsError, EmptySampleError
from chat_utils.version import __version__

__all__: list[str] = [
    "ChatUtilsError",
    "EmptySampleError",
    "TypingIndicator",
    "__version__",
    "build_variable_map",
    "clamp",
    "convert_seconds_to_time_unit",
    "create_typing_indicator",
    "debounce",
    "find_undefined_variables",
    "format_date",
    "format_time",
    "get_contrasting_text_color",
    "parse_boolean",
    "quantile",
    "quantile_intervals",
    "quantile_of_sorted",
    "replace_variables",
    "sort_ascending",
    "trim_content",
]
