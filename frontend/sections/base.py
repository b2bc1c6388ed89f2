# sections/base.py
"""
Patrón CRUD común a Skills, Projects y Contact.

La colección local sólo cambia con respuestas del servidor, y siempre por
``id``: nunca se inventan ids ni se aplica lo que el usuario tipeó.
Mientras una mutación sobre un item está en vuelo, otra sobre el mismo
item se rechaza. Si la sección se desmonta (o se vuelve a montar) antes de
que llegue la respuesta, la respuesta se descarta.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from frontend.login.auth_state import AuthGate
from frontend.utils.api_client import ApiError
from frontend.utils.forms import EditBuffer, missing_fields

logger = logging.getLogger(__name__)

NEW_ITEM = "__new__"


class CollectionSection:
    noun = "item"
    editable: Sequence[str] = ()
    defaults: Dict[str, Any] = {}
    required: Sequence[str] = ()
    list_fields: Sequence[str] = ()
    # dónde entra un item recién creado: "start" | "end"
    insert_at = "end"

    def __init__(self, api, gate: AuthGate):
        self.api = api
        self.gate = gate
        self.items: List[Dict[str, Any]] = []
        self.error: Optional[str] = None
        self.success: Optional[str] = None
        self.loading = False
        self.loaded = False
        self.buffer: Optional[EditBuffer] = None
        self.pending_delete: Optional[str] = None
        self.mounted = False
        self._generation = 0
        self._in_flight: set[str] = set()
        self._unsubscribe: Optional[Callable[[], None]] = None

    # ---------- ciclo de vida ----------

    def mount(self) -> None:
        self._generation += 1
        self.mounted = True
        if self._unsubscribe is None:
            self._unsubscribe = self.gate.subscribe(self._on_gate_change)
        self.refresh()

    def unmount(self) -> None:
        self._generation += 1
        self.mounted = False
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_gate_change(self, gate: AuthGate) -> None:
        if not gate.is_admin():
            self.buffer = None
            self.pending_delete = None

    def refresh(self) -> None:
        gen = self._generation
        self.loading = True
        try:
            data = self.api.get_all()
        except ApiError as e:
            if gen == self._generation:
                # fail-open: lista vacía + error reintentable
                self.items = []
                self.loaded = False
                self.error = f"Failed to fetch {self.noun}s: {e.message}"
            return
        finally:
            if gen == self._generation:
                self.loading = False
        if gen != self._generation:
            logger.debug("Discarding stale %s list", self.noun)
            return
        self.items = [dict(i) for i in (data or [])]
        self.loaded = True
        self.error = None

    # ---------- helpers ----------

    def item(self, item_id: str) -> Optional[Dict[str, Any]]:
        for it in self.items:
            if it.get("id") == item_id:
                return it
        return None

    def is_busy(self, item_id: Optional[str] = None) -> bool:
        return (item_id or NEW_ITEM) in self._in_flight

    def dismiss_error(self) -> None:
        self.error = None

    def dismiss_success(self) -> None:
        self.success = None

    def _fail(self, message: str) -> Tuple[None, str]:
        self.error = message
        return None, message

    def _mutate(self, key: str, action: str, call: Callable[[], Any],
                admin: bool = True) -> Tuple[Any, Optional[str], bool]:
        """
        Ejecuta ``call`` con las reglas de la sección.
        Devuelve (resultado, error, aplicar); ``aplicar`` es False si la
        respuesta llegó a una sección ya desmontada.
        """
        if admin and not self.gate.is_admin():
            msg = f"Admin session required to {action} {self.noun}s"
            self.error = msg
            return None, msg, False
        if key in self._in_flight:
            msg = f"Another change to this {self.noun} is still in progress"
            self.error = msg
            return None, msg, False

        gen = self._generation
        self._in_flight.add(key)
        try:
            result = call()
        except ApiError as e:
            msg = f"Failed to {action} {self.noun}: {e.message}"
            if gen == self._generation:
                self.error = msg
            return None, msg, False
        finally:
            self._in_flight.discard(key)

        if gen != self._generation:
            logger.debug("Discarding %s response for released %s section", action, self.noun)
            return result, None, False
        return result, None, True

    def _insert(self, item: Dict[str, Any]) -> None:
        self.items = [i for i in self.items if i.get("id") != item["id"]]
        if self.insert_at == "start":
            self.items.insert(0, item)
        else:
            self.items.append(item)

    def _replace(self, item: Dict[str, Any]) -> None:
        self.items = [item if i.get("id") == item["id"] else i for i in self.items]

    def _remove(self, item_id: str) -> None:
        self.items = [i for i in self.items if i.get("id") != item_id]

    # ---------- formulario ----------

    def open_create(self) -> Optional[EditBuffer]:
        if not self.gate.is_admin():
            return None
        self.buffer = EditBuffer.for_create(self.defaults, self.list_fields)
        return self.buffer

    def open_edit(self, item_id: str) -> Optional[EditBuffer]:
        if not self.gate.is_admin():
            return None
        item = self.item(item_id)
        if item is None:
            self._fail(f"Unknown {self.noun}: {item_id}")
            return None
        self.buffer = EditBuffer.for_edit(item, self.editable, self.defaults, self.list_fields)
        return self.buffer

    def cancel_edit(self) -> None:
        self.buffer = None

    def save(self) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
        buf = self.buffer
        if buf is None:
            return self._fail("Nothing to save")

        payload = buf.to_payload()
        missing = missing_fields(payload, self.required)
        if missing:
            return self._fail(f"Missing required fields: {', '.join(missing)}")

        if buf.is_new:
            result, err, apply = self._mutate(
                NEW_ITEM, "create", lambda: self.api.create(payload))
        else:
            result, err, apply = self._mutate(
                buf.item_id, "update", lambda: self.api.update(buf.item_id, payload))
        if err or not apply:
            return None, err
        if not isinstance(result, dict) or not result.get("id"):
            return self._fail(f"Server returned an invalid {self.noun}")

        if buf.is_new:
            self._insert(result)
        else:
            self._replace(result)
        if self.buffer is buf:
            self.buffer = None
        self.error = None
        return result, None

    # ---------- borrado en dos pasos ----------

    def request_delete(self, item_id: str) -> None:
        if self.gate.is_admin() and self.item(item_id) is not None:
            self.pending_delete = item_id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> Tuple[bool, Optional[str]]:
        item_id = self.pending_delete
        if item_id is None:
            return False, "Nothing to delete"
        self.pending_delete = None
        _, err, apply = self._mutate(item_id, "delete", lambda: self.api.delete(item_id))
        if err:
            return False, err
        if apply:
            self._remove(item_id)
            self.error = None
        return True, None
