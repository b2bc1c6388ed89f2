# login/auth_ui.py
import streamlit as st

from frontend.login.auth_state import AuthGate


def login_panel(gate: AuthGate) -> bool:
    """Formulario de login. Devuelve True si la sesión se inició."""
    st.header("Admin login")
    if gate.error:
        st.error(gate.error)

    with st.form("login_form", clear_on_submit=False):
        email = st.text_input("Email", key="login_email")
        password = st.text_input("Password", type="password", key="login_password")
        submitted = st.form_submit_button("Log in")

    if not submitted:
        return False
    if not email or not password:
        st.warning("Enter email and password.")
        return False

    with st.spinner("Logging in…"):
        ok, err = gate.login(email, password)
    if not ok:
        st.error(f"Login failed: {err}")
    return ok


def sidebar_user_box(gate: AuthGate) -> bool:
    """Usuario conectado + botón Salir. Devuelve True si se hizo logout."""
    user = gate.user
    if user is None:
        return False
    st.sidebar.caption(f"Connected as:\n**{user.email}** ({user.role.value})")
    if st.sidebar.button("⎋ Logout", use_container_width=True):
        gate.logout()
        return True
    return False
