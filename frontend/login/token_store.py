# login/token_store.py
"""
Persistencia del bearer token entre recargas.

No cifra ni controla expiración: el servidor decide si el token sigue
siendo válido y el cliente se entera recién cuando recibe un 401.
"""
import logging
import re
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

_PROFILE_RE = re.compile(r"[^A-Za-z0-9_.-]")


class TokenStore(Protocol):
    def save(self, token: str) -> None: ...

    def load(self) -> Optional[str]: ...

    def clear(self) -> None: ...


def _check_token(token: str) -> str:
    if not isinstance(token, str) or not token.strip():
        raise ValueError("token must be a non-empty string")
    return token.strip()


class MemoryTokenStore:
    """Vive lo que vive el proceso. Útil para tests y sesiones efímeras."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def save(self, token: str) -> None:
        self._token = _check_token(token)

    def load(self) -> Optional[str]:
        return self._token

    def clear(self) -> None:
        self._token = None


class FileTokenStore:
    """
    Un archivo por perfil dentro de ``directory``; sobrevive a recargas.

    Queda en la máquina que corre Streamlit: todos los navegadores que se
    conectan comparten el archivo. Sólo para instalaciones de un usuario.
    """

    def __init__(self, directory: Path, profile: str = "default"):
        safe = _PROFILE_RE.sub("_", profile or "default")
        self.path = Path(directory).expanduser() / f"{safe}.token"

    def save(self, token: str) -> None:
        token = _check_token(token)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        try:
            self.path.chmod(0o600)
        except OSError:
            logger.debug("Could not restrict permissions on %s", self.path)

    def load(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class CookieTokenStore:
    """
    El token vive en una cookie del navegador, así cada perfil de navegador
    tiene su propia sesión aunque todos hablen con el mismo servidor Streamlit.

    ``manager`` es un ``extra_streamlit_components.CookieManager``; se crea en
    cada corrida del script y se vuelve a enganchar con ``bind``. Lo escrito
    recién llega al navegador en la próxima corrida, por eso se cachea acá.
    """

    def __init__(self, manager, name: str = "portfolio_token", expiry_days: int = 30):
        self.manager = manager
        self.name = name
        self.expiry_days = expiry_days
        self._token: Optional[str] = None
        self._cleared = False
        self._writes = 0

    def bind(self, manager) -> None:
        self.manager = manager

    def is_loaded(self) -> bool:
        """True cuando el componente ya devolvió las cookies del navegador."""
        return bool(self.manager.get_all())

    def _key(self, action: str) -> str:
        self._writes += 1
        return f"{self.name}_{action}_{self._writes}"

    def save(self, token: str) -> None:
        token = _check_token(token)
        expires = datetime.now() + timedelta(days=self.expiry_days)
        self.manager.set(self.name, token, expires_at=expires, key=self._key("set"))
        self._token = token
        self._cleared = False

    def load(self) -> Optional[str]:
        if self._cleared:
            return None
        if self._token:
            return self._token
        value = self.manager.get(self.name)
        if not value:
            return None
        return str(value).strip() or None

    def clear(self) -> None:
        self._token = None
        self._cleared = True
        try:
            self.manager.delete(self.name, key=self._key("delete"))
        except KeyError:
            # la cookie ya no estaba
            logger.debug("Cookie %s already gone", self.name)
