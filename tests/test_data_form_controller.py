"""Tests for DataFormController."""

import pytest


def _make(view=None, views=None, update_on=None, source_update_on=None, **config):
    from pyqt_dataform.forms import DataFormConfig, DataFormController, DataSource

    events = []
    source = DataSource(
        view=view,
        views=views,
        update_on=source_update_on,
        on_view_change=lambda v: events.append(("view", v)),
    )
    controller = DataFormController(
        source,
        DataFormConfig(
            update_on=update_on,
            on_touched=lambda t: events.append(("touched", t)),
            on_done=lambda: events.append(("done",)),
            **config,
        ),
    )
    return controller, events


def test_initial_state_is_encoded_view(qapp, status_views):
    """The form starts clean with the encoded source view."""
    from pyqt_dataform import UpdateOn, encode_view

    view = status_views.get("A")
    controller, events = _make(view=view, views=status_views)

    assert controller.form_value == encode_view(view)
    assert controller.dirty is False
    assert controller.update_on is UpdateOn.SUBMIT
    assert controller.can_submit is True
    assert controller.show_reset is False
    assert events == []


def test_form_value_is_a_copy(qapp):
    """Callers cannot edit the live form value in place."""
    from pyqt_dataform import View

    controller, _ = _make(view=View(properties={"color": ["red"]}))
    value = controller.form_value
    value["color"].append("blue")

    assert controller.form_value["color"] == ["red"]


def test_update_on_resolution(qapp):
    """Form config beats data source, which beats library settings."""
    from pyqt_dataform import DataFormSettings, UpdateOn, set_form_settings

    assert _make(update_on="change", source_update_on="submit")[0].update_on is UpdateOn.CHANGE
    assert _make(source_update_on=UpdateOn.CHANGE)[0].update_on is UpdateOn.CHANGE

    set_form_settings(DataFormSettings(default_update_on=UpdateOn.CHANGE))
    assert _make()[0].update_on is UpdateOn.CHANGE

    with pytest.raises(ValueError):
        _make(update_on="whenever")


def test_change_propagates_when_updating_on_change(qapp, status_views):
    """Touched report first, then the View; the name drops on divergence."""
    from pyqt_dataform import ScalarFilter
    from pyqt_dataform.forms import FormEvent

    controller, events = _make(view=status_views.get("A"), views=status_views, update_on="change")
    controller.on_change(FormEvent.of({"_view": "A", "status": "closed", "_search": ""}, {"status"}))

    assert [e[0] for e in events] == ["touched", "view"]
    assert events[0][1] == {"status": "closed"}
    emitted = events[1][1]
    assert emitted.name is None
    assert emitted.properties == {"status": ScalarFilter("closed")}
    assert controller.dirty is True
    assert controller.can_submit is False


def test_change_holds_when_updating_on_submit(qapp, status_views):
    """In submit mode a change only marks the form dirty."""
    from pyqt_dataform.forms import FormEvent

    controller, events = _make(view=status_views.get("A"), views=status_views)
    dirty_states = []
    controller.dirty_changed.connect(dirty_states.append)

    controller.on_change(FormEvent.of({"_view": "A", "status": "closed"}, {"status"}))

    assert events == []
    assert controller.dirty is True
    assert controller.show_reset is True
    assert controller.form_value == {"status": "closed"}
    assert dirty_states == [True]


def test_submit_propagates_and_completes(qapp, status_views):
    """Submit emits touched, View and done, in that order, and cleans the form."""
    from pyqt_dataform.forms import FormEvent

    controller, events = _make(view=status_views.get("A"), views=status_views)
    controller.on_change(FormEvent.of({"_view": "A", "status": "open", "_search": "x"}))
    controller.on_submit(FormEvent.of({"_view": "A", "status": "open", "_search": "bob"}, {"_search"}))

    assert [e[0] for e in events] == ["touched", "view", "done"]
    assert events[0][1] == {"_search": "bob"}
    assert events[1][1].name == "A"
    assert events[1][1].search == "bob"
    assert controller.dirty is False


def test_submit_unavailable_when_updating_on_change(qapp):
    """Submitting a change-driven form is a programmer error."""
    from pyqt_dataform import SubmitNotAvailableError
    from pyqt_dataform.forms import FormEvent

    controller, events = _make(update_on="change")
    with pytest.raises(SubmitNotAvailableError):
        controller.on_submit(FormEvent.of({"_search": "x"}))
    assert events == []


def test_commit_happens_before_emission(qapp, status_views):
    """Slots see the committed form value and dirty flag."""
    from pyqt_dataform.forms import FormEvent

    controller, _ = _make(view=status_views.get("A"), views=status_views, update_on="change")
    seen = []
    controller.view_changed.connect(lambda v: seen.append((controller.form_value, controller.dirty)))

    controller.on_change(FormEvent.of({"_view": "A", "status": "closed", "_search": ""}))

    assert seen == [({"status": "closed", "_search": ""}, True)]


def test_reset_restores_external_view(qapp, status_views):
    """Reset discards edits and emits no View."""
    from pyqt_dataform import encode_view
    from pyqt_dataform.forms import FormEvent

    view = status_views.get("A")
    controller, events = _make(view=view, views=status_views)
    controller.on_change(FormEvent.of({"status": "closed"}))
    controller.on_reset()

    assert controller.form_value == encode_view(view)
    assert controller.dirty is False
    assert events == []


def test_external_view_always_wins(qapp, status_views):
    """A new View replaces unsaved edits and cleans the form."""
    from pyqt_dataform import encode_view
    from pyqt_dataform.forms import FormEvent

    controller, _ = _make(view=status_views.get("A"), views=status_views)
    controller.on_change(FormEvent.of({"status": "closed"}))
    controller.set_view({"properties": {"status": "pending"}, "page": 2})

    assert controller.form_value == {"status": "pending", "_page": 2, "_search": ""}
    assert controller.dirty is False

    controller.set_view(None)
    assert controller.form_value == encode_view(None)


def test_pushed_back_view_is_stable(qapp, status_views):
    """An owner that feeds every emitted View straight back does not drift."""
    from pyqt_dataform.forms import FormEvent

    controller, _ = _make(view=status_views.get("A"), views=status_views, update_on="change")
    controller.view_changed.connect(controller.set_view)

    for value in (
        {"_view": "A", "status": "open", "_search": ""},
        {"_view": "A", "status": "closed", "_search": "bob"},
        {"_view": "B", "status": "ignored"},
    ):
        controller.on_change(FormEvent.of(value))
        settled = controller.form_value
        controller.set_view(controller.current_view())
        assert controller.form_value == settled


def test_view_switch_through_controller(qapp, status_views):
    """Selecting a preset emits that preset."""
    from pyqt_dataform.forms import FormEvent

    controller, events = _make(view=status_views.get("A"), views=status_views, update_on="change")
    controller.on_change(FormEvent.of({"_view": "B", "q": "x"}, {"_view"}))

    assert events[0] == ("touched", {"_view": "B"})
    assert events[1][1] == status_views.get("B")


def test_edit_while_paging_returns_to_first_page(qapp):
    """Changing a filter on page 3 emits page 1."""
    from pyqt_dataform import View
    from pyqt_dataform.forms import FormEvent

    controller, events = _make(view=View(properties={"q": "a"}, page=3), update_on="change")
    controller.on_change(FormEvent.of({"q": "b", "_page": 3, "_search": ""}, {"q"}))

    assert events[1][1].page == 1
    assert controller.form_value["_page"] == 1


def test_range_edit_reports_whole_property(qapp):
    """A range input edit is reported against the property."""
    from pyqt_dataform import RangeFilter, View
    from pyqt_dataform.forms import FormEvent

    controller, events = _make(view=View(properties={"age": {"min": 1, "max": 9}}), update_on="change")
    controller.on_change(FormEvent.of({"age": {"_range": [20, 30]}, "_search": ""}, {"age._range"}))

    assert events[0] == ("touched", {"age._range": {"_range": [20, 30]}})
    assert events[1][1].properties["age"] == RangeFilter(20, 30)


def test_malformed_event_value_rejected(qapp):
    """A form value must be a mapping."""
    from pyqt_dataform import MalformedFormValueError
    from pyqt_dataform.forms import FormEvent

    controller, _ = _make(update_on="change")
    with pytest.raises(MalformedFormValueError):
        controller.on_change(FormEvent(value=["status"]))


def test_committed_value_independent_of_event(qapp):
    """Editing the event value after the fact leaves the committed form value alone."""
    from pyqt_dataform.forms import FormEvent

    controller, _ = _make()
    edited = {"color": ["red"], "age": {"_range": [1, 5]}, "_search": ""}
    controller.on_change(FormEvent.of(edited))
    edited["color"].append("blue")
    edited["age"]["_range"][1] = 50

    assert controller.form_value["color"] == ["red"]
    assert controller.form_value["age"] == {"_range": [1, 5]}

    controller.on_submit(FormEvent.of(edited))
    edited["color"].clear()
    assert controller.form_value["color"] == ["red", "blue"]


def test_set_views_changes_named_view_resolution(qapp, status_views):
    """Switching presets resolves against the replaced collection."""
    from pyqt_dataform import ScalarFilter, View
    from pyqt_dataform.forms import FormEvent

    controller, events = _make(view=View(properties={"q": "a"}), update_on="change")
    controller.set_views(status_views)
    assert controller.views.names() == ["A", "B"]

    controller.on_change(FormEvent.of({"_view": "A", "q": "a"}))
    assert events[-1][1].name == "A"
    assert events[-1][1].properties == {"status": ScalarFilter("open")}

    controller.set_views([View(name="C", properties={"status": "pending"})])
    controller.on_change(FormEvent.of({"_view": "C"}))
    assert events[-1][1].name == "C"
    assert controller.form_value == {"status": "pending", "_view": "C", "_search": ""}

    controller.on_change(FormEvent.of({"_view": "A", "status": "open", "_search": ""}))
    assert controller.form_value == {"status": "open", "_search": ""}
    assert events[-1][1].name is None


def test_view_name_without_collection_is_ignored(qapp):
    """With no named views a '_view' edit is a plain edit and the name is dropped."""
    from pyqt_dataform import ScalarFilter
    from pyqt_dataform.forms import FormEvent

    controller, events = _make(update_on="change")
    controller.on_change(FormEvent.of({"_view": "A", "status": "open", "_search": ""}))

    assert controller.form_value == {"status": "open", "_search": ""}
    emitted = events[-1][1]
    assert emitted.name is None
    assert emitted.properties == {"status": ScalarFilter("open")}
