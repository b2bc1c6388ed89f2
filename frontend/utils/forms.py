# utils/forms.py
from __future__ import annotations
import copy
from typing import Any, Dict, Iterable, List, Optional, Sequence


def split_csv(text: Optional[str]) -> List[str]:
    """"React, Node.js , ,MongoDB" -> ["React", "Node.js", "MongoDB"]"""
    return [t.strip() for t in (text or "").split(",") if t.strip()]


def join_csv(items: Optional[Iterable[Any]]) -> str:
    return ", ".join(str(i) for i in (items or []))


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def missing_fields(data: Dict[str, Any], required: Sequence[str]) -> List[str]:
    """Sólo presencia: qué campos obligatorios están vacíos."""
    return [f for f in required if _is_blank(data.get(f))]


class EditBuffer:
    """
    Copia local de un item mientras el formulario está abierto.

    Nunca comparte objetos con la colección: lo que se edita acá no se ve
    en otro lado hasta que el servidor confirma el guardado. Los campos
    lista (``list_fields``) se editan como texto separado por comas.
    """

    def __init__(self, item_id: Optional[str], fields: Dict[str, Any],
                 list_fields: Sequence[str] = ()):
        self.item_id = item_id
        self.list_fields = tuple(list_fields)
        self.fields = copy.deepcopy(fields)
        for name in self.list_fields:
            value = self.fields.get(name)
            if not isinstance(value, str):
                self.fields[name] = join_csv(value)

    @classmethod
    def for_create(cls, defaults: Dict[str, Any], list_fields: Sequence[str] = ()) -> "EditBuffer":
        return cls(None, defaults, list_fields)

    @classmethod
    def for_edit(cls, item: Dict[str, Any], editable: Sequence[str],
                 defaults: Dict[str, Any], list_fields: Sequence[str] = ()) -> "EditBuffer":
        fields = {name: item.get(name, defaults.get(name)) for name in editable}
        # los opcionales que vienen como None se editan con su default
        for name, value in fields.items():
            if value is None:
                fields[name] = copy.deepcopy(defaults.get(name))
        return cls(item.get("id"), fields, list_fields)

    @property
    def is_new(self) -> bool:
        return self.item_id is None

    def set(self, name: str, value: Any) -> None:
        self.fields[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def to_payload(self) -> Dict[str, Any]:
        """Lo que se manda al servidor: listas de verdad, nunca texto con comas."""
        payload = copy.deepcopy(self.fields)
        for name in self.list_fields:
            value = payload.get(name)
            payload[name] = split_csv(value) if isinstance(value, str) else list(value or [])
        return payload
