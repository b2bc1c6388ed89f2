# views/common.py
import streamlit as st


def inline_messages(section, key: str) -> None:
    """Error / éxito de la sección, descartables."""
    error = getattr(section, "error", None)
    if error:
        c1, c2 = st.columns([6, 1])
        with c1:
            st.error(error)
        with c2:
            if st.button("✕", key=f"{key}_dismiss_error", help="Dismiss"):
                section.error = None
                st.rerun()
    success = getattr(section, "success", None)
    if success:
        st.success(success)


def delete_confirmation(section, label: str, key: str) -> None:
    """Segundo paso del borrado: nada sale a la red hasta confirmar."""
    item_id = section.pending_delete
    if not item_id:
        return
    st.warning(f"Are you sure you want to delete this {label}?")
    c1, c2 = st.columns(2)
    with c1:
        if st.button("Yes, delete", key=f"{key}_confirm_delete", type="primary"):
            with st.spinner("Deleting…"):
                section.confirm_delete()
            st.rerun()
    with c2:
        if st.button("Cancel", key=f"{key}_cancel_delete"):
            section.cancel_delete()
            st.rerun()


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:] if text else text
