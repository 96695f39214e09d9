"""Event log sub-view state: browsing vs. filter editing, substring filter."""

from __future__ import annotations

from dataclasses import dataclass, field

from ecseagle.constants.enums import EventLogMode
from ecseagle.models.core.service_info import ServiceEvent


def find_match_spans(text: str, query: str) -> list[tuple[int, int]]:
    """Case-insensitive, non-overlapping ``(start, end)`` spans of ``query``."""
    if not query:
        return []
    haystack = text.lower()
    needle = query.lower()
    spans: list[tuple[int, int]] = []
    start = haystack.find(needle)
    while start != -1:
        end = start + len(needle)
        spans.append((start, end))
        start = haystack.find(needle, end)
    return spans


@dataclass
class EventLogState:
    """State of the nested event log of one service detail."""

    events: tuple[ServiceEvent, ...] = ()
    mode: EventLogMode = EventLogMode.BROWSING
    filter_text: str = ""
    _visible: tuple[ServiceEvent, ...] | None = field(default=None, repr=False)

    @property
    def is_filtering(self) -> bool:
        """True while the filter input captures keystrokes."""
        return self.mode is EventLogMode.FILTERING

    @property
    def visible_events(self) -> tuple[ServiceEvent, ...]:
        """Events whose message contains the filter text, case-insensitively."""
        if self._visible is None:
            query = self.filter_text.lower()
            if not query:
                self._visible = self.events
            else:
                self._visible = tuple(e for e in self.events if query in e.message.lower())
        return self._visible

    def highlight_spans(self, event: ServiceEvent) -> list[tuple[int, int]]:
        return find_match_spans(event.message, self.filter_text)

    def replace_events(self, events: tuple[ServiceEvent, ...]) -> None:
        """Swap in events from a fresh snapshot, keeping mode and filter."""
        self.events = tuple(events)
        self._visible = None

    def start_filtering(self) -> None:
        self.mode = EventLogMode.FILTERING

    def set_filter(self, text: str) -> None:
        self.filter_text = text
        self._visible = None

    def clear_filter(self) -> None:
        self.set_filter("")

    def stop_filtering(self) -> None:
        """Leave filter editing, discarding the filter text."""
        self.mode = EventLogMode.BROWSING
        self.clear_filter()
