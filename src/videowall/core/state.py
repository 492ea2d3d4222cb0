"""Application state and its transition function.

`reducer(state, action)` is the only way state changes. It never mutates
the snapshot it is given and never performs I/O; the session layer is
responsible for persistence around it.

Results are recalculated on every lock transition. They exist only while
exactly two parameters are locked and the locked geometry is solvable.
"""

from dataclasses import dataclass, field, replace
from typing import Callable

from loguru import logger

from videowall.core.nearest import find_nearest_index
from videowall.core.records import SavedSelection
from videowall.core.solver import CalcInput, Config, Param, calculate
from videowall.core.units import Unit


MODAL_SOURCES = ("help", "quote")


def _all_params(value) -> dict[Param, object]:
    return {param: value for param in Param}


@dataclass(frozen=True)
class AppState:
    """Snapshot of everything the UI renders."""

    locks: dict[Param, bool] = field(default_factory=lambda: _all_params(False))
    values: dict[Param, float] = field(default_factory=lambda: _all_params(0.0))
    unit: Unit = Unit.INCHES
    results: tuple[Config, ...] | None = None
    nearest_index: int | None = None
    selected_index: int | None = None
    confirmed: Config | None = None
    history: tuple[SavedSelection, ...] = ()
    modal_open: bool = False
    modal_source: str | None = None
    error: str | None = None

    @property
    def locked_params(self) -> list[Param]:
        return [param for param in Param if self.locks[param]]

    @property
    def lock_count(self) -> int:
        return len(self.locked_params)

    def calc_input(self) -> CalcInput | None:
        """The solver input implied by the current locks, if any."""
        return CalcInput.from_locked({p: self.values[p] for p in self.locked_params})


def initial_state(unit: Unit = Unit.INCHES) -> AppState:
    return AppState(unit=unit)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LockParam:
    param: Param
    value: float


@dataclass(frozen=True)
class UnlockParam:
    param: Param


@dataclass(frozen=True)
class SetUnit:
    unit: Unit


@dataclass(frozen=True)
class SelectOption:
    index: int


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class OpenModal:
    source: str


@dataclass(frozen=True)
class CloseModal:
    pass


@dataclass(frozen=True)
class DeleteHistory:
    id: str


@dataclass(frozen=True)
class LoadHistory:
    history: tuple[SavedSelection, ...]


@dataclass(frozen=True)
class ReloadHistory:
    """Restore the inputs of a saved selection and re-confirm it."""

    selection: SavedSelection


Action = (
    LockParam | UnlockParam | SetUnit | SelectOption | Confirm | Cancel
    | OpenModal | CloseModal | DeleteHistory | LoadHistory | ReloadHistory
)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def _cleared(state: AppState, **changes) -> AppState:
    """Apply `changes` and drop all derived results."""
    return replace(
        state,
        **{
            "results": None,
            "nearest_index": None,
            "selected_index": None,
            "confirmed": None,
            "error": None,
            **changes,
        },
    )


def _recalculate(state: AppState) -> AppState:
    inp = state.calc_input()
    if inp is None:
        return _cleared(state)

    result = calculate(inp)
    if not result.ok:
        logger.warning(f"No valid geometry for {inp.combo.value}: {result.error}")
        return _cleared(state, error=result.error)

    nearest = find_nearest_index(result.configs, inp)
    logger.debug(f"Calculated {inp.combo.value} -> {len(result.configs)} configs, nearest={nearest}")
    return _cleared(state, results=result.configs, nearest_index=nearest)


def _lock_param(state: AppState, action: LockParam) -> AppState:
    locks = {**state.locks, action.param: True}
    values = {**state.values, action.param: action.value}
    return _recalculate(replace(state, locks=locks, values=values))


def _unlock_param(state: AppState, action: UnlockParam) -> AppState:
    return _cleared(state, locks={**state.locks, action.param: False})


def _set_unit(state: AppState, action: SetUnit) -> AppState:
    return replace(state, unit=action.unit)


def _select_option(state: AppState, action: SelectOption) -> AppState:
    return replace(state, selected_index=action.index)


def _confirm(state: AppState, action: Confirm) -> AppState:
    if state.results is None or state.selected_index is None:
        return state
    if not 0 <= state.selected_index < len(state.results):
        return state
    return replace(state, confirmed=state.results[state.selected_index])


def _cancel(state: AppState, action: Cancel) -> AppState:
    return replace(state, selected_index=None)


def _open_modal(state: AppState, action: OpenModal) -> AppState:
    return replace(state, modal_open=True, modal_source=action.source)


def _close_modal(state: AppState, action: CloseModal) -> AppState:
    return replace(state, modal_open=False, modal_source=None)


def _delete_history(state: AppState, action: DeleteHistory) -> AppState:
    return replace(state, history=tuple(h for h in state.history if h.id != action.id))


def _load_history(state: AppState, action: LoadHistory) -> AppState:
    return replace(state, history=tuple(action.history))


def _reload_history(state: AppState, action: ReloadHistory) -> AppState:
    params = action.selection.input_params
    locks = {param: param in params.values for param in Param}
    values = {**state.values, **params.values}
    restored = _recalculate(replace(state, locks=locks, values=values, unit=params.unit))
    if restored.results is None:
        return restored

    target = action.selection
    for i, config in enumerate(restored.results):
        if (
            config.cabinet_type == target.cabinet_type
            and config.rows == target.rows
            and config.cols == target.cols
        ):
            return replace(restored, selected_index=i, confirmed=config)
    return restored


_HANDLERS: dict[type, Callable[[AppState, object], AppState]] = {
    LockParam: _lock_param,
    UnlockParam: _unlock_param,
    SetUnit: _set_unit,
    SelectOption: _select_option,
    Confirm: _confirm,
    Cancel: _cancel,
    OpenModal: _open_modal,
    CloseModal: _close_modal,
    DeleteHistory: _delete_history,
    LoadHistory: _load_history,
    ReloadHistory: _reload_history,
}


def reducer(state: AppState, action: Action) -> AppState:
    """Return the state that results from applying `action` to `state`."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unhandled action: {action!r}")
    return handler(state, action)
