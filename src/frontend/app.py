"""Main Textual app for the Bulletin announcements panel."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, DataTable, Footer, Input, Static

from adapters.announcement_formatting import clip_text, format_date, format_summary_line
from core.errors import AnnouncementError
from core.models import AnnouncementDraft
from core.service import AnnouncementService
from .constants import BULLETIN_AMBER, TABLE_TITLE_CHARS
from .modals import AnnouncementFormScreen, DeleteAnnouncementScreen
from .state import PanelState
from .validators import parse_similar_count


class AnnouncementsPanelApp(App):
    """Browse, edit and inspect announcements together with their similar ones."""

    BINDINGS = [
        ("a", "add_announcement", "Add"),
        ("e", "edit_announcement", "Edit"),
        ("d", "delete_announcement", "Delete"),
        ("r", "refresh", "Refresh"),
        ("q", "quit", "Quit"),
    ]

    CSS_PATH = "app.tcss"

    def __init__(self, service: AnnouncementService, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._service = service
        self.panel_state = PanelState(similar_count=service.config.default_similar_count)

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static("whole-word similarity, oldest first", classes="subtle")
                with Vertical(id="header-right"):
                    yield Static("", id="header-count", classes="subtle")
                    yield Static("", id="header-status")

        with Horizontal(id="body"):
            with Container(id="list-pane"):
                yield DataTable(id="announcements-table", cursor_type="row")
            with Vertical(id="detail-pane"):
                yield Static("", id="detail-title")
                yield Static("", id="detail-meta", classes="subtle")
                yield Static("", id="detail-description")
                yield Static("similar count", classes="form-label")
                yield Input(value=str(self.panel_state.similar_count), id="similar-count")
                yield Static("Similar announcements", id="similar-title")
                yield Static("", id="similar-list")

        with Horizontal(id="actions"):
            yield Button("Add", id="add-btn", variant="success")
            yield Button("Edit", id="edit-btn")
            yield Button("Delete", id="delete-btn", variant="error")
            yield Button("Refresh", id="refresh-btn")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#announcements-table", DataTable)
        table.add_column("id", key="id", width=6)
        table.add_column("added", key="added_date", width=17)
        table.add_column("title", key="title", width=TABLE_TITLE_CHARS)
        table.zebra_stripes = True
        self.action_refresh()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-btn":
            self.action_add_announcement()
        elif event.button.id == "edit-btn":
            self.action_edit_announcement()
        elif event.button.id == "delete-btn":
            self.action_delete_announcement()
        elif event.button.id == "refresh-btn":
            self.action_refresh()

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        if event.row_key is None or event.row_key.value is None:
            return
        self.panel_state.selected_id = int(event.row_key.value)
        self._show_details()

    @on(Input.Submitted, "#similar-count")
    def _on_similar_count_submitted(self, event: Input.Submitted) -> None:
        config = self._service.config
        check = parse_similar_count(event.value, config.default_similar_count, config.max_similar_count)
        if check.error or check.value is None:
            self._set_status(check.error or "invalid similar count", error=True)
            return
        self.panel_state.similar_count = check.value
        self._show_details()

    def action_refresh(self) -> None:
        table = self.query_one("#announcements-table", DataTable)
        table.clear()
        try:
            announcements = self._service.list_announcements()
        except AnnouncementError as exc:
            self._set_status(str(exc), error=True)
            return
        for announcement in announcements:
            table.add_row(
                str(announcement.id),
                format_date(announcement.added_date),
                clip_text(announcement.title, TABLE_TITLE_CHARS),
                key=str(announcement.id),
            )
        self.query_one("#header-count", Static).update(f"announcements: {len(announcements)}")
        known_ids = {announcement.id for announcement in announcements}
        if self.panel_state.selected_id not in known_ids:
            self.panel_state.selected_id = announcements[0].id if announcements else None
        if self.panel_state.selected_id is not None:
            table.move_cursor(row=table.get_row_index(str(self.panel_state.selected_id)))
        self._show_details()
        self._update_action_state()
        self._set_status("loaded")

    def action_add_announcement(self) -> None:
        self.push_screen(AnnouncementFormScreen("Add announcement"), self._handle_add)

    def action_edit_announcement(self) -> None:
        selected = self.panel_state.selected_id
        if selected is None:
            return
        try:
            announcement = self._service.get(selected)
        except AnnouncementError as exc:
            self._set_status(str(exc), error=True)
            return
        initial = AnnouncementDraft(title=announcement.title, description=announcement.description)
        self.push_screen(AnnouncementFormScreen(f"Edit #{selected}", initial), self._handle_edit)

    def action_delete_announcement(self) -> None:
        selected = self.panel_state.selected_id
        if selected is None:
            return
        try:
            announcement = self._service.get(selected)
        except AnnouncementError as exc:
            self._set_status(str(exc), error=True)
            return
        self.push_screen(DeleteAnnouncementScreen(format_summary_line(announcement)), self._handle_delete)

    def _handle_add(self, draft: AnnouncementDraft | None) -> None:
        if draft is None:
            return
        try:
            announcement_id = self._service.create(draft)
        except AnnouncementError as exc:
            self._set_status(str(exc), error=True)
            return
        self.panel_state.selected_id = announcement_id
        self.action_refresh()
        self._set_status(f"created #{announcement_id}")

    def _handle_edit(self, draft: AnnouncementDraft | None) -> None:
        selected = self.panel_state.selected_id
        if draft is None or selected is None:
            return
        try:
            self._service.update(selected, draft)
        except AnnouncementError as exc:
            self._set_status(str(exc), error=True)
            return
        self.action_refresh()
        self._set_status(f"updated #{selected}")

    def _handle_delete(self, confirmed: bool | None) -> None:
        selected = self.panel_state.selected_id
        if not confirmed or selected is None:
            return
        try:
            self._service.delete(selected)
        except AnnouncementError as exc:
            self._set_status(str(exc), error=True)
            return
        self.panel_state.selected_id = None
        self.action_refresh()
        self._set_status(f"deleted #{selected}")

    def _show_details(self) -> None:
        title = self.query_one("#detail-title", Static)
        meta = self.query_one("#detail-meta", Static)
        description = self.query_one("#detail-description", Static)
        similar_list = self.query_one("#similar-list", Static)

        selected = self.panel_state.selected_id
        if selected is None:
            title.update("No announcement selected")
            meta.update("")
            description.update("")
            similar_list.update("")
            return

        try:
            details = self._service.get_details(selected, self.panel_state.similar_count)
        except AnnouncementError as exc:
            self._set_status(str(exc), error=True)
            return

        title.update(Text(details.title, style="bold"))
        meta.update(f"#{details.id}  added {format_date(details.added_date)}")
        description.update(details.description)
        if details.similar:
            similar_list.update("\n".join(format_summary_line(item) for item in details.similar))
        else:
            similar_list.update("none")

    def _update_action_state(self) -> None:
        has_selection = self.panel_state.selected_id is not None
        self.query_one("#edit-btn", Button).disabled = not has_selection
        self.query_one("#delete-btn", Button).disabled = not has_selection

    def _set_status(self, message: str, error: bool = False) -> None:
        self.panel_state.error = message if error else None
        status = self.query_one("#header-status", Static)
        status.remove_class("status-loaded", "status-error")
        status.add_class("status-error" if error else "status-loaded")
        status.update(message)

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("BULLETIN", BULLETIN_AMBER),
            (" > Announcements", "bold"),
        )
