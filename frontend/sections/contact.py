# sections/contact.py
from typing import Any, Dict, Optional, Tuple

from frontend.login.auth_state import AuthGate
from frontend.sections.base import CollectionSection
from frontend.utils.forms import missing_fields

STATUSES = ("unread", "read", "replied")
SEND_KEY = "__send__"


def _empty_form() -> Dict[str, str]:
    return {"name": "", "email": "", "message": ""}


class ContactSection(CollectionSection):
    """
    Formulario público de contacto + bandeja de mensajes para el admin.
    La bandeja sólo se pide con sesión admin y se vacía al perderla.
    """
    noun = "message"
    required = ("name", "email", "message")
    insert_at = "start"

    def __init__(self, api, gate: AuthGate):
        super().__init__(api, gate)
        self.form: Dict[str, str] = _empty_form()

    def refresh(self) -> None:
        if not self.gate.is_admin():
            self.items = []
            self.loaded = False
            return
        super().refresh()

    def _on_gate_change(self, gate: AuthGate) -> None:
        super()._on_gate_change(gate)
        if not gate.is_admin():
            self.items = []
            self.loaded = False

    def unread_count(self) -> int:
        return sum(1 for m in self.items if m.get("status") == "unread")

    def send(self) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
        self.success = None
        payload = {k: (v or "").strip() for k, v in self.form.items()}
        missing = missing_fields(payload, self.required)
        if missing:
            return self._fail(f"Missing required fields: {', '.join(missing)}")

        result, err, apply = self._mutate(
            SEND_KEY, "send", lambda: self.api.create(payload), admin=False)
        if err:
            self.error = "Failed to send message. Please try again."
            return None, err
        if not apply:
            return None, None

        self.form = _empty_form()
        self.error = None
        self.success = "Message sent successfully!"
        if self.loaded and isinstance(result, dict) and result.get("id"):
            self._insert(result)
        return result, None

    def set_status(self, message_id: str, status: str) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
        if status not in STATUSES:
            return self._fail(f"Unknown status: {status}")
        if self.item(message_id) is None:
            return self._fail(f"Unknown message: {message_id}")

        result, err, apply = self._mutate(
            message_id, "update", lambda: self.api.update(message_id, {"status": status}))
        if err or not apply:
            return None, err
        if not isinstance(result, dict) or result.get("id") != message_id:
            return self._fail("Server returned an invalid message")
        self._replace(result)
        self.error = None
        return result, None
