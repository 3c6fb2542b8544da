import streamlit as st
from datetime import date
from catalog_studio.app import runtime, state
from catalog_studio.core.orchestrator import RequestStatus
from catalog_studio.utils.errors import ValidationError, ui_error_boundary
from catalog_studio.utils.typing import LicenseType

QUICK_PICKS = {"30 days": 30, "90 days": 90, "180 days": 180, "1 year": 365}

@ui_error_boundary
def render() -> None:
    """Parameter entry for the selected item. Hidden once a result is shown."""
    controller = state.get_controller()
    item = controller.selection
    request = controller.request
    if item is None or request.status is RequestStatus.SUCCESS:
        return
    params = controller.orchestrator.parameters

    with st.container(border=True):
        head, close = st.columns([5, 1])
        with head:
            st.subheader(f"🔑 {item.name}")
            if item.code:
                st.caption(f"Code: {item.code}")
        with close:
            if st.button("✖ Close", key="close_generation", disabled=request.is_in_flight):
                controller.close_generation()
                st.rerun()

        st.markdown("**Expiry**")
        pick_cols = st.columns(len(QUICK_PICKS))
        for col, (label, days) in zip(pick_cols, QUICK_PICKS.items()):
            with col:
                if st.button(f"+{label}", key=f"expiry_{days}", use_container_width=True):
                    controller.orchestrator.set_expiry_offset(days)
                    st.rerun()

        picked = st.date_input("Expiry date", value=date.fromisoformat(params.expiry_date))
        try:
            controller.orchestrator.set_expiry_date(picked.isoformat())
        except ValidationError as e:
            st.error(str(e))

        c1, c2 = st.columns(2)
        with c1:
            types = list(LicenseType)
            license_type = st.selectbox(
                "License type", types, index=types.index(params.license_type), format_func=lambda t: t.value.title()
            )
            controller.orchestrator.set_license_type(license_type)
        with c2:
            users = st.number_input("Users", min_value=1, step=1, value=params.user_count)
            controller.orchestrator.set_user_count(int(users))

        if controller.state.needs_configuration:
            st.warning("Save a licensee and assignee name in the sidebar first.")

        if request.status is RequestStatus.FAILED:
            st.error(f"Last attempt failed: {request.reason}")

        clicked = st.button(
            "⚡ Generate",
            type="primary",
            use_container_width=True,
            disabled=not controller.can_generate(),
        )
        if clicked:
            with st.spinner("Generating..."):
                runtime.run(controller.generate())
            st.rerun()
