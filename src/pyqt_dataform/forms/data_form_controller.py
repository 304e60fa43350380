"""Data form controller - keeps a form value in sync with a data source's View."""

from dataclasses import dataclass, field
import copy
import logging
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Union

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_dataform.exceptions import MalformedFormValueError, SubmitNotAvailableError
from pyqt_dataform.protocols.form_config import UpdateOn, get_form_settings
from pyqt_dataform.services.flag_context_manager import ControllerFlag, FlagContextManager
from pyqt_dataform.services.touched_mapper import transform_touched
from pyqt_dataform.services.view_codec import FormValue, decode_form_value, encode_view
from pyqt_dataform.services.view_normalizer import reconcile, reset_page
from .view_types import View, ViewCollection

logger = logging.getLogger(__name__)


@dataclass
class DataSource:
    """
    The data being filtered: its current View, the named views on offer and
    how it wants to hear about changes.

    The controller reads these and never mutates them in place.
    """
    view: Optional[Any] = None
    views: Optional[Any] = None
    update_on: Optional[Union[UpdateOn, str]] = None
    on_view_change: Optional[Callable[[View], None]] = None


@dataclass
class DataFormConfig:
    """
    Per-form configuration for DataFormController.

    update_on overrides the data source's policy; the callbacks are
    connected to the matching signals.
    """
    update_on: Optional[Union[UpdateOn, str]] = None
    on_touched: Optional[Callable[[Dict[str, Any]], None]] = None
    on_done: Optional[Callable[[], None]] = None


@dataclass(frozen=True)
class FormEvent:
    """Immutable change or submit event from the form surface."""
    value: Mapping[str, Any]
    touched: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, value: Mapping[str, Any], touched: Iterable[str] = ()) -> 'FormEvent':
        if isinstance(touched, Mapping):
            touched = touched.keys()
        return cls(value=value, touched=frozenset(touched))


class DataFormController(QObject):
    """
    Owns the live form value of a data form and its dirty flag.

    Clean --change--> Dirty --submit/reset--> Clean; a new external View
    forces Clean from either state.

    Every emission happens after the new value is committed, so slots that
    read form_value or push the emitted View straight back in through
    set_view() always see committed state.

    Examples:
        source = DataSource(view=view, views=views, on_view_change=apply_view)
        controller = DataFormController(source, DataFormConfig(update_on='change'))
        controller.on_change(FormEvent.of({'status': 'closed', '_search': ''}, {'status'}))
    """

    view_changed = pyqtSignal(object)  # View
    touched_reported = pyqtSignal(object)  # dict: path -> current value
    done = pyqtSignal()
    dirty_changed = pyqtSignal(bool)

    def __init__(
        self,
        source: DataSource,
        config: Optional[DataFormConfig] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        config = config or DataFormConfig()

        # Flags managed by FlagContextManager
        self._emitting = False

        self._update_on = UpdateOn.coerce(
            config.update_on or source.update_on or get_form_settings().default_update_on
        )
        self._view: Optional[View] = View.from_dict(source.view) if source.view is not None else None
        self._views = ViewCollection.coerce(source.views)

        self._form_value: FormValue = encode_view(self._view)
        self._dirty = False

        if source.on_view_change is not None:
            self.view_changed.connect(source.on_view_change)
        if config.on_touched is not None:
            self.touched_reported.connect(config.on_touched)
        if config.on_done is not None:
            self.done.connect(config.on_done)

        logger.debug(
            f"DataFormController created: update_on={self._update_on.value}, "
            f"views={self._views.names()}"
        )

    # ========== STATE ==========

    @property
    def form_value(self) -> FormValue:
        """Copy of the live form value."""
        return copy.deepcopy(self._form_value)

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def update_on(self) -> UpdateOn:
        return self._update_on

    @property
    def views(self) -> ViewCollection:
        return self._views

    @property
    def can_submit(self) -> bool:
        """Submit is only offered when edits propagate on submit."""
        return self._update_on is UpdateOn.SUBMIT

    @property
    def show_reset(self) -> bool:
        """Reset is only worth offering once there is something to undo."""
        return self.can_submit and self._dirty

    def current_view(self) -> View:
        """The View the live form value decodes to, without emitting it."""
        return decode_form_value(self._form_value, self._views)

    def _set_dirty(self, dirty: bool) -> None:
        if dirty != self._dirty:
            self._dirty = dirty
            self.dirty_changed.emit(dirty)

    def _trace(self, message: str) -> None:
        if get_form_settings().debug_controller:
            logger.info(message)
        else:
            logger.debug(message)

    # ========== EXTERNAL VIEW ==========

    def set_view(self, view: Any) -> None:
        """
        Replace the data source's View. The external View always wins: the
        form value is re-encoded and any unsaved edit is discarded.
        """
        if FlagContextManager.is_flag_set(self, ControllerFlag.EMITTING):
            self._trace("View pushed back in while emitting; re-encoding")
        self._view = View.from_dict(view) if view is not None else None
        self._form_value = encode_view(self._view)
        self._set_dirty(False)

    def set_views(self, views: Any) -> None:
        """Replace the collection of named views."""
        self._views = ViewCollection.coerce(views)
        logger.debug(f"Views replaced: {self._views.names()}")

    # ========== FORM EVENTS ==========

    def _normalize(self, event: FormEvent) -> FormValue:
        if not isinstance(event.value, Mapping):
            raise MalformedFormValueError(
                f"Form value must be a mapping, got {type(event.value).__name__}"
            )
        next_value = reconcile(event.value, self._form_value, self._views)
        return reset_page(next_value, self._form_value)

    def _emit(self, next_value: FormValue, touched: FrozenSet[str]) -> None:
        with FlagContextManager.emission_context(self):
            self.touched_reported.emit(transform_touched(touched, copy.deepcopy(next_value)))
            self.view_changed.emit(decode_form_value(next_value, self._views))

    def on_change(self, event: FormEvent) -> None:
        """Commit an edit; propagate it right away when updating on change."""
        next_value = self._normalize(event)
        self._form_value = next_value
        self._set_dirty(True)
        self._trace(f"change committed: {sorted(next_value)}")

        if self._update_on is UpdateOn.CHANGE:
            self._emit(next_value, event.touched)

    def on_submit(self, event: FormEvent) -> None:
        """Commit and always propagate, then signal completion."""
        if not self.can_submit:
            raise SubmitNotAvailableError(
                f"Form updates on {self._update_on.value}; there is nothing to submit"
            )
        next_value = self._normalize(event)
        self._form_value = next_value
        self._set_dirty(False)
        self._trace(f"submit committed: {sorted(next_value)}")

        self._emit(next_value, event.touched)
        self.done.emit()

    def on_reset(self) -> None:
        """Discard edits by re-encoding the current external View. Emits no View."""
        self._form_value = encode_view(self._view)
        self._set_dirty(False)
        self._trace("form reset to external view")
