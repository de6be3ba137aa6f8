from selectorforge.ui_state import compute_workspace_button_state


def test_compute_button_state_rules() -> None:
    empty = compute_workspace_button_state(has_markup=False, has_results=False, has_selection=False)
    assert not empty.can_generate
    assert not empty.can_copy
    assert not empty.can_clear

    ready = compute_workspace_button_state(has_markup=True, has_results=True, has_selection=False)
    assert ready.can_generate
    assert not ready.can_copy
    assert ready.can_clear

    selected = compute_workspace_button_state(has_markup=True, has_results=True, has_selection=True)
    assert selected.can_copy


def test_clear_stays_enabled_for_results_after_markup_is_removed() -> None:
    state = compute_workspace_button_state(has_markup=False, has_results=True, has_selection=True)
    assert not state.can_generate
    assert state.can_copy
    assert state.can_clear
