"""Text/JSON output helpers.

Successful results render for humans (Rich output, emoji headers) or as
pretty-printed JSON of the normalized data. Failed results in JSON mode
serialize the whole envelope so scripts can read the error code.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

from ghzero.output.renderers import render_result

if TYPE_CHECKING:
    from ghzero.components.result import ComponentResult

OUTPUT_FORMATS = ("text", "json")


def format_result(result: ComponentResult, *, op: str, output_format: str = "text") -> str:
    """Format a ComponentResult for display.

    Args:
        result: The component result to format.
        op: Operation name used to pick the text renderer.
        output_format: ``"text"`` or ``"json"``.
    """
    if output_format == "json":
        if result.is_success():
            return _json.dumps(result.get_data(), indent=2, ensure_ascii=False, default=str)
        return result.model_dump_json(indent=2)
    if result.is_success():
        return render_result(result, op)
    return f"❌ {result.get_error()}"
