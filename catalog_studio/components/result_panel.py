import streamlit as st
from catalog_studio.app import state
from catalog_studio.core.orchestrator import RequestStatus
from catalog_studio.utils.errors import ui_error_boundary

@ui_error_boundary
def render() -> None:
    controller = state.get_controller()
    request = controller.request
    if request.status is not RequestStatus.SUCCESS:
        return

    with st.container(border=True):
        st.subheader("✅ Generated")
        # st.code has its own copy button, which covers clipboard failures
        st.code(request.payload or "", language=None, wrap_lines=True)
        c1, c2 = st.columns(2)
        with c1:
            if st.button("📋 Copy", key="copy_result", use_container_width=True):
                controller.copy_result()
                st.rerun()
        with c2:
            if st.button("Done", key="ack_result", use_container_width=True):
                controller.acknowledge_result()
                st.rerun()
