import streamlit as st

from utils.cards import chip
from utils.session import get_console

st.set_page_config(page_title="Patient Profile", layout="centered")

console = get_console()
context = console.selected_resident

if context is None:
    st.info("Select a resident from the console to view their profile")
    st.stop()

if st.button("Done"):
    console.close_profile()
    st.switch_page("app.py")

profile = context.profile

with st.container(border=True):
    st.subheader(profile.name)
    st.caption(f"Room {profile.room} • Age {profile.age}")
    pending_col, attended_col, resolved_col = st.columns(3)
    pending_col.metric("Pending", context.pending_count)
    attended_col.metric("Attended", context.attended_count)
    resolved_col.metric("Resolved", context.resolved_count)

with st.container(border=True):
    st.markdown("#### Profile")
    for title, value in [
        ("Communication", profile.communication_style),
        ("Care Notes", profile.care_notes),
        ("Emergency Contact", profile.emergency_contact),
    ]:
        st.caption(title)
        st.write(value)

with st.container(border=True):
    st.markdown("#### Request History")
    for item in context.history:
        with st.container(border=True):
            type_col, time_col = st.columns([3, 1])
            type_col.markdown(f"**{item.request_type}**")
            time_col.caption(item.time_ago)
            st.write(item.note)
            st.markdown(
                chip(item.status.label, item.status.tint)
                + " "
                + chip(item.status.attendance_text, item.status.attendance_tint)
            )
