import streamlit as st

from iris_console.models.request import AssistanceRequest
from iris_console.services.alert_simulator import banner_message


def show_demo_banner() -> None:
    st.caption("Monitor eye-triggered assistance requests from residents.")


def show_alert_banner(request: AssistanceRequest) -> None:
    st.toast(banner_message(request), icon="🔔")
