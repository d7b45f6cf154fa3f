from __future__ import annotations

from typing import List, Tuple

from csv_browser.services.viewer_session import ViewerSession


def column_control_values(session: ViewerSession) -> Tuple[List[dict], List[str], List[dict]]:
    """
    Checklist options (display order), checked values, and move-select options.
    """
    if not session.has_dataset:
        return [], [], []
    state = session.column_state
    options = [{"label": f, "value": f} for f in state.order]
    checked = [f for f in state.order if f in state.visible]
    move_options = [{"label": f, "value": str(i)} for i, f in enumerate(state.order)]
    return options, checked, move_options
