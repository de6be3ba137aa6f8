from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WorkspaceButtonState:
    can_generate: bool
    can_copy: bool
    can_clear: bool


def compute_workspace_button_state(
    *,
    has_markup: bool,
    has_results: bool,
    has_selection: bool,
) -> WorkspaceButtonState:
    return WorkspaceButtonState(
        can_generate=has_markup,
        can_copy=has_results and has_selection,
        can_clear=has_markup or has_results,
    )
