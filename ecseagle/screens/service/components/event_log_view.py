"""Scrollable, filterable event log of one service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import Vertical, VerticalScroll

from ecseagle.constants.limits import MAX_EVENTS_DISPLAY
from ecseagle.constants.screens.service import EVENT_FILTER_PLACEHOLDER, NO_EVENTS_MESSAGE
from ecseagle.models.state.event_log import EventLogState
from ecseagle.screens.service.presenter import ServicePresenter
from ecseagle.widgets import CustomInput, CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult


def render_event_log(state: EventLogState, presenter: ServicePresenter) -> Text:
    """Visible events, newest first, with filter matches highlighted."""
    events = state.visible_events[:MAX_EVENTS_DISPLAY]
    if not events:
        return Text(NO_EVENTS_MESSAGE, style=presenter.theme.muted)
    return Text("\n").join(
        presenter.event_line(event, state.highlight_spans(event)) for event in events
    )


def event_log_header(state: EventLogState) -> str:
    total = len(state.events)
    if state.filter_text:
        return f'events ({len(state.visible_events)} of {total} matching "{state.filter_text}")'
    return f"events ({total})"


class EventLogView(Vertical):
    """Filter input above a scrollable list of event lines."""

    DEFAULT_CSS = """
    EventLogView {
        height: 1fr;
    }
    EventLogView > #event-log-header {
        height: 1;
        text-style: bold;
    }
    EventLogView > #event-log-scroll {
        height: 1fr;
    }
    """

    def compose(self) -> ComposeResult:
        yield CustomStatic("", id="event-log-header", markup=False)
        yield CustomInput(placeholder=EVENT_FILTER_PLACEHOLDER, id="event-filter")
        with VerticalScroll(id="event-log-scroll"):
            yield CustomStatic("", id="event-log-lines", markup=False)

    @property
    def filter_input(self) -> CustomInput:
        return self.query_one("#event-filter", CustomInput)

    def show_state(self, state: EventLogState, presenter: ServicePresenter) -> None:
        self.query_one("#event-log-header", CustomStatic).update(event_log_header(state))
        self.query_one("#event-log-lines", CustomStatic).update(render_event_log(state, presenter))

        filter_input = self.filter_input
        if filter_input.value != state.filter_text:
            filter_input.value = state.filter_text
        if state.is_filtering and not filter_input.is_shown:
            filter_input.show()
        elif not state.is_filtering:
            if filter_input.is_shown:
                filter_input.hide()
            self.query_one("#event-log-scroll", VerticalScroll).focus()


__all__ = [
    "EventLogView",
    "event_log_header",
    "render_event_log",
]
