"""Export sessions to interchange documents."""

from plan_engine.serialization.export import (
    export_filename,
    export_window,
    render_export,
    select_export_window,
)
from plan_engine.serialization.fit_stub import to_fit_stub, to_fit_stub_string
from plan_engine.serialization.interchange import (
    from_interchange_json,
    to_interchange_json,
    to_interchange_json_string,
)

__all__ = [
    "export_filename",
    "export_window",
    "from_interchange_json",
    "render_export",
    "select_export_window",
    "to_fit_stub",
    "to_fit_stub_string",
    "to_interchange_json",
    "to_interchange_json_string",
]
