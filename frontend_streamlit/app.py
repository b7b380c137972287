import logging

import streamlit as st

from iris_console.config import get_settings
from iris_console.logging_config import configure_logging
from iris_console.models.request import RequestFilter
from utils.banners import show_alert_banner, show_demo_banner
from utils.cards import avatar, chip
from utils.session import get_console

st.set_page_config(page_title="IRIS Caregiver Console", layout="centered")

if "logging_configured" not in st.session_state:
    configure_logging(get_settings())
    st.session_state["logging_configured"] = True

logger = logging.getLogger(__name__)
console = get_console()

header, actions = st.columns([3, 1])
with header:
    st.subheader("IRIS Caregiver Console")
    show_demo_banner()
with actions:
    if st.button("Simulate Alert", icon="🔔", type="primary"):
        simulated = console.simulate_alert()
        st.session_state["filter"] = RequestFilter.ALL.label
        show_alert_banner(simulated)
    st.markdown(":green-background[:green[Live]]")
    st.caption(f"{len(console.store)} requests")

summary = console.summary()
pending_col, critical_col, caregivers_col = st.columns(3)
pending_col.metric("Pending", summary.pending)
critical_col.metric("Critical", summary.critical)
caregivers_col.metric("Active Caregivers", summary.active_caregivers)

labels = {f.label: f for f in RequestFilter}
choice = st.radio(
    "Filter", list(labels), horizontal=True, key="filter", label_visibility="collapsed"
)
console.select_filter(labels[choice])

requests = console.visible_requests()
if not requests:
    st.info("No requests match this filter")

for request in requests:
    with st.container(border=True):
        left, middle, right = st.columns([1, 5, 2])
        with left:
            avatar(request)
        with middle:
            if st.button(request.resident_name, key=f"profile-{request.id}", type="tertiary"):
                console.open_profile(request.id)
                st.switch_page("pages/1_Resident_Profile.py")
            st.caption(f"Room {request.room}  •  {request.time_ago}")
        with right:
            st.markdown(chip(request.urgency.label, request.urgency.tint))

        st.markdown(f"**{request.request_type}**")
        st.write(request.note)

        attend_col, resolve_col, status_col = st.columns([1, 1, 2])
        if attend_col.button(
            "Attend",
            key=f"attend-{request.id}",
            disabled=not console.store.can_attend(request),
        ):
            console.attend(request.id)
            logger.info("Attended request %s", request.id)
            st.rerun()
        if resolve_col.button(
            "Resolve",
            key=f"resolve-{request.id}",
            disabled=not console.store.can_resolve(request),
        ):
            console.resolve(request.id)
            logger.info("Resolved request %s", request.id)
            st.rerun()
        status_col.markdown(chip(request.status.label, request.status.tint))
