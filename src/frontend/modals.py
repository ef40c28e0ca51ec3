"""Modal dialogs for the Textual announcements panel."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static, TextArea

from core.models import AnnouncementDraft, DESCRIPTION_MAX_CHARS, TITLE_MAX_CHARS
from .validators import check_draft_fields


class AnnouncementFormScreen(ModalScreen[AnnouncementDraft | None]):
    """Modal form for adding or editing an announcement."""

    def __init__(self, heading: str, initial: AnnouncementDraft | None = None) -> None:
        super().__init__()
        self._heading = heading
        self._initial = initial or AnnouncementDraft(title="", description="")

    def compose(self) -> ComposeResult:
        yield Container(
            Static(self._heading, classes="modal-title"),
            Static("", id="form-error", classes="modal-error"),
            Static(f"title (max {TITLE_MAX_CHARS})", classes="form-label"),
            Input(value=self._initial.title, placeholder="Title", id="form-title"),
            Static(f"description (max {DESCRIPTION_MAX_CHARS})", classes="form-label"),
            TextArea(self._initial.description, id="form-description"),
            Horizontal(
                Button("Save", id="form-confirm", variant="success"),
                Button("Cancel", id="form-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--form",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "form-cancel":
            self.dismiss(None)
            return
        if event.button.id != "form-confirm":
            return
        title = self.query_one("#form-title", Input).value
        description = self.query_one("#form-description", TextArea).text
        check = check_draft_fields(title, description)
        if check.error or check.draft is None:
            self.query_one("#form-error", Static).update(check.error or "invalid announcement")
            return
        self.dismiss(check.draft)


class DeleteAnnouncementScreen(ModalScreen[bool]):
    """Confirm deletion of an announcement."""

    def __init__(self, label: str) -> None:
        super().__init__()
        self._label = label

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Delete announcement?", classes="modal-title"),
            Static(self._label, classes="modal-body"),
            Horizontal(
                Button("Delete", id="delete-confirm", variant="error"),
                Button("Cancel", id="delete-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--confirm",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "delete-confirm":
            self.dismiss(True)
        else:
            self.dismiss(False)
