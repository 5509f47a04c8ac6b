# tableglyphs/trace.py
"""Diagnostic trace file for the decoration engine.

Scanner, lifecycle, host and formatter components report boundary-finder
failures and state changes here instead of printing, since they run
inside redisplay where output would corrupt the screen.

The file is chosen by TABLEGLYPHS_TRACE_LOG. Setting it to an empty
string turns tracing off; leaving it unset writes to
tableglyphs_trace.log in the temp directory.
"""

import os
import tempfile
import traceback
from datetime import datetime
from typing import Optional


TRACE_ENV_VAR = "TABLEGLYPHS_TRACE_LOG"
DEFAULT_TRACE_FILE = "tableglyphs_trace.log"


def trace_path() -> Optional[str]:
    """Return the trace file in use, or None when tracing is off."""
    value = os.environ.get(TRACE_ENV_VAR)
    if value is None:
        return os.path.join(tempfile.gettempdir(), DEFAULT_TRACE_FILE)
    return value or None


def trace(component: str, msg: str, *, include_traceback: bool = False) -> None:
    """Append one line for component to the trace file.

    With include_traceback the exception being handled is appended too.
    A trace file that cannot be written is ignored, so tracing never
    interrupts a scan or a realign.
    """
    path = trace_path()
    if path is None:
        return
    stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    lines = [f"[{stamp}] [{component}] {msg}\n"]
    if include_traceback:
        tb = traceback.format_exc()
        if tb.strip() != "NoneType: None":
            lines.append(tb)
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "a") as f:
            f.writelines(lines)
    except OSError:
        pass  # An unwritable trace file must not break redisplay
