import asyncio

import streamlit as st

from iris_console.services.console import CaregiverConsole, create_console


def get_console() -> CaregiverConsole:
    if "console" not in st.session_state:
        # Each interaction reruns the script, so no loop outlives a click to
        # host the dismiss timer; st.toast shows the banner instead.
        console = create_console(with_banner=False)
        asyncio.run(console.notifications.request_authorization_once())
        st.session_state["console"] = console
    return st.session_state["console"]
