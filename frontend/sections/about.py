# sections/about.py
import logging
from typing import Any, Callable, Dict, Optional, Tuple

from frontend.login.auth_state import AuthGate
from frontend.utils.api_client import ApiError
from frontend.utils.forms import EditBuffer

logger = logging.getLogger(__name__)

ABOUT_FIELDS = ("bio", "interests", "experience", "education", "location", "resume_url")
ABOUT_DEFAULTS: Dict[str, Any] = {
    "bio": "",
    "interests": [],
    "experience": "",
    "education": "",
    "location": "",
    "resume_url": "",
}


class AboutSection:
    """
    Registro único: se lee al montar y sólo se actualiza.
    Cancelar vuelve el buffer a lo último que mandó el servidor.
    """

    def __init__(self, api, gate: AuthGate):
        self.api = api
        self.gate = gate
        self.about: Dict[str, Any] = dict(ABOUT_DEFAULTS)
        self.buffer = self._buffer_from_snapshot()
        self.editing = False
        self.saving = False
        self.loading = False
        self.error: Optional[str] = None
        self._generation = 0
        self._unsubscribe: Optional[Callable[[], None]] = None

    def _buffer_from_snapshot(self) -> EditBuffer:
        return EditBuffer.for_edit(self.about, ABOUT_FIELDS, ABOUT_DEFAULTS,
                                   list_fields=("interests",))

    def mount(self) -> None:
        self._generation += 1
        if self._unsubscribe is None:
            self._unsubscribe = self.gate.subscribe(self._on_gate_change)
        if not self.gate.is_admin():
            self.cancel_edit()
        self.refresh()

    def unmount(self) -> None:
        self._generation += 1
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_gate_change(self, gate: AuthGate) -> None:
        # sin admin no queda ningún formulario abierto
        if not gate.is_admin():
            self.cancel_edit()

    def refresh(self) -> None:
        gen = self._generation
        self.loading = True
        try:
            data = self.api.get()
        except ApiError as e:
            if gen == self._generation:
                self.error = f"Failed to fetch about information: {e.message}"
                self.loading = False
            return
        if gen != self._generation:
            return
        self.loading = False
        self.about = dict(data or ABOUT_DEFAULTS)
        self.buffer = self._buffer_from_snapshot()
        self.error = None

    def start_edit(self) -> Optional[EditBuffer]:
        if not self.gate.is_admin():
            return None
        self.buffer = self._buffer_from_snapshot()
        self.editing = True
        return self.buffer

    def cancel_edit(self) -> None:
        self.buffer = self._buffer_from_snapshot()
        self.editing = False

    def save(self) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
        if not self.gate.is_admin():
            self.error = "Admin session required to update about information"
            return None, self.error
        if self.saving:
            self.error = "A save is already in progress"
            return None, self.error

        gen = self._generation
        payload = self.buffer.to_payload()
        self.saving = True
        try:
            updated = self.api.update(payload)
        except ApiError as e:
            if gen == self._generation:
                # el buffer queda abierto para reintentar
                self.error = f"Failed to update about information: {e.message}"
            return None, e.message
        finally:
            self.saving = False
        if gen != self._generation:
            logger.debug("Discarding about update for released section")
            return updated, None

        self.about = dict(updated or {})
        self.buffer = self._buffer_from_snapshot()
        self.editing = False
        self.error = None
        return self.about, None
