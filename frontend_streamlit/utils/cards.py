import streamlit as st

from iris_console.models.request import AssistanceRequest


def chip(text: str, tint: str) -> str:
    color = _streamlit_color(tint)
    return f":{color}-background[:{color}[{text}]]"


def avatar(request: AssistanceRequest) -> None:
    if request.avatar_url:
        st.image(request.avatar_url, width=40)
    else:
        st.markdown(f"**{request.initials}**")


def _streamlit_color(tint: str) -> str:
    # Streamlit markdown has no teal.
    return {"teal": "violet"}.get(tint, tint)
