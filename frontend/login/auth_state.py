# login/auth_state.py
"""
Estado de sesión del cliente (quién está logueado y si es admin).

Un único ``AuthGate`` por sesión de UI; se pasa explícitamente a cada sección
y al menú. Es sólo para la UX: el backend valida cada endpoint por su cuenta.

    INITIALIZING --initialize()--> AUTHENTICATED | ANONYMOUS
    ANONYMOUS | AUTH_ERROR --login() ok--> AUTHENTICATED
    AUTHENTICATED --logout()--> ANONYMOUS
    AUTHENTICATED --401 con token--> AUTH_ERROR
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from frontend.login.auth_client import AuthApi
from frontend.login.token_store import TokenStore
from frontend.utils.api_client import ApiError, AuthFailure

logger = logging.getLogger(__name__)


class AuthStatus(str, Enum):
    INITIALIZING = "initializing"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    AUTH_ERROR = "auth_error"


class Role(str, Enum):
    admin = "admin"
    user = "user"


@dataclass(frozen=True)
class SessionUser:
    email: str
    role: Role


@dataclass(frozen=True)
class Session:
    token: Optional[str] = None
    user: Optional[SessionUser] = None


def parse_user(data: Any) -> SessionUser:
    """``{email, role}`` -> SessionUser. Rol fuera del enum = ValueError."""
    if not isinstance(data, dict) or not data.get("email"):
        raise ValueError("malformed user payload")
    return SessionUser(email=str(data["email"]), role=Role(data.get("role")))


class AuthGate:
    def __init__(self, store: TokenStore, auth_api: AuthApi):
        self.store = store
        self.auth_api = auth_api
        self.status = AuthStatus.INITIALIZING
        self.session = Session()
        self.error: Optional[str] = None
        # token guardado mientras se verifica en initialize()
        self._pending_token: Optional[str] = None
        self._subscribers: List[Callable[["AuthGate"], None]] = []

    # ---------- consultas ----------

    @property
    def user(self) -> Optional[SessionUser]:
        return self.session.user

    @property
    def is_authenticated(self) -> bool:
        return self.status == AuthStatus.AUTHENTICATED

    @property
    def is_ready(self) -> bool:
        return self.status != AuthStatus.INITIALIZING

    def bearer(self) -> Optional[str]:
        """Token que acompaña los requests: sólo el de esta sesión."""
        return self.session.token or self._pending_token

    def is_admin(self) -> bool:
        return (
            self.status == AuthStatus.AUTHENTICATED
            and self.session.user is not None
            and self.session.user.role == Role.admin
        )

    # ---------- observadores ----------

    def subscribe(self, callback: Callable[["AuthGate"], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set(self, status: AuthStatus, session: Session, error: Optional[str] = None) -> None:
        previous = self.status
        self.status = status
        self.session = session
        self.error = error
        if previous != status:
            logger.info("Auth state %s -> %s", previous.value, status.value)
        for callback in list(self._subscribers):
            callback(self)

    # ---------- transiciones ----------

    def initialize(self) -> AuthStatus:
        """Verifica el token guardado. Idempotente una vez resuelto."""
        if self.status != AuthStatus.INITIALIZING:
            return self.status

        token = self.store.load()
        if not token:
            self._set(AuthStatus.ANONYMOUS, Session())
            return self.status

        self._pending_token = token
        try:
            data = self.auth_api.verify()
            user = parse_user((data or {}).get("user"))
        except (ApiError, ValueError) as e:
            logger.info("Stored token rejected: %s", e)
            self.store.clear()
            self._set(AuthStatus.ANONYMOUS, Session())
            return self.status
        finally:
            self._pending_token = None

        self._set(AuthStatus.AUTHENTICATED, Session(token=token, user=user))
        return self.status

    def login(self, email: str, password: str) -> Tuple[bool, Optional[str]]:
        if self.status == AuthStatus.INITIALIZING:
            return False, "Session is still loading"
        if self.status == AuthStatus.AUTHENTICATED:
            return False, "Already logged in"
        if not (email or "").strip() or not (password or "").strip():
            return False, "Email and password are required"

        try:
            data = self.auth_api.login(email, password) or {}
            token = data.get("token")
            if not token:
                raise ValueError("login response without token")
            user = parse_user(data.get("user"))
        except AuthFailure as e:
            msg = e.message if e.status_code == 401 else f"Login failed: {e.message}"
            self._set(AuthStatus.ANONYMOUS, Session(), msg)
            return False, msg
        except ApiError as e:
            self._set(AuthStatus.ANONYMOUS, Session(), e.message)
            return False, e.message
        except ValueError as e:
            msg = f"Unexpected login response: {e}"
            self._set(AuthStatus.ANONYMOUS, Session(), msg)
            return False, msg

        self.store.save(token)
        self._set(AuthStatus.AUTHENTICATED, Session(token=token, user=user))
        return True, None

    def logout(self) -> None:
        self.store.clear()
        self._set(AuthStatus.ANONYMOUS, Session())

    def handle_auth_failure(self, err: AuthFailure) -> None:
        """El servidor rechazó nuestro token en algún request: la sesión muere."""
        if self.status != AuthStatus.AUTHENTICATED:
            return
        self.store.clear()
        self._set(AuthStatus.AUTH_ERROR, Session(),
                  "Your session has expired. Please log in again.")

    def dismiss_error(self) -> None:
        if self.status == AuthStatus.AUTH_ERROR:
            self._set(AuthStatus.ANONYMOUS, Session())
        else:
            self.error = None
