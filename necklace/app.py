"""
ADD NECKLACE Streamlit page.

Usage:
    streamlit run necklace/app.py
"""

import streamlit as st
from dotenv import load_dotenv

from necklace.config import Config
from necklace.editor import GeminiImageEditor
from necklace.images import accepts_upload, encode_upload
from necklace.orchestrator import STATUS_MESSAGES, NecklaceOrchestrator, Stage
from necklace.render import PageRenderer
from necklace.session import SessionState

st.set_page_config(page_title="Add Necklace", page_icon="💎", layout="wide")

load_dotenv()


@st.cache_resource
def get_editor() -> GeminiImageEditor:
    return GeminiImageEditor.from_config(Config.from_env())


@st.cache_resource
def get_renderer() -> PageRenderer:
    return PageRenderer()


def init_session_state():
    """Initialize session state variables."""
    if 'necklace_session' not in st.session_state:
        st.session_state.necklace_session = SessionState()
    if 'uploader_nonce' not in st.session_state:
        st.session_state.uploader_nonce = 0


def uploader_key(slot: str) -> str:
    return f"{slot}_uploader_{st.session_state.uploader_nonce}"


def selected_upload(slot: str):
    """Uploaded file for a slot; files with a non-image type are ignored."""
    uploaded = st.session_state.get(uploader_key(slot))
    if not accepts_upload(uploaded):
        return False, None
    return True, uploaded


def on_person_selected():
    accepted, uploaded = selected_upload('person')
    if accepted:
        st.session_state.necklace_session.select_person(encode_upload(uploaded))


def on_necklace_selected():
    accepted, uploaded = selected_upload('necklace')
    if accepted:
        st.session_state.necklace_session.select_necklace(encode_upload(uploaded))


def start_over():
    """Drop everything, including the uploader widgets."""
    st.session_state.necklace_session.reset()
    st.session_state.uploader_nonce += 1


def upload_slot(title: str, slot: str, on_change, image):
    with st.container(border=True):
        st.subheader(title)
        st.file_uploader(
            "Drag & drop or click to upload",
            type=None,
            key=uploader_key(slot),
            on_change=on_change,
        )
        if image is not None:
            st.image(image.raw, caption="Preview", width="stretch")


def run_generation(session: SessionState):
    try:
        editor = get_editor()
    except ValueError as e:
        session.error_text = str(e)
        return

    with st.status(STATUS_MESSAGES[Stage.REMOVING_NECKLACE], expanded=False) as status:
        def show_stage(stage):
            label = STATUS_MESSAGES.get(stage)
            if label:
                status.update(label=label, state="running")

        orchestrator = NecklaceOrchestrator(editor, on_stage=show_stage)
        if session.generate(orchestrator):
            status.update(label="Done", state="complete")
        else:
            status.update(label="Generation failed", state="error")


def main():
    init_session_state()
    session: SessionState = st.session_state.necklace_session
    renderer = get_renderer()

    st.markdown(renderer.styles(), unsafe_allow_html=True)
    st.markdown(renderer.header(), unsafe_allow_html=True)

    if session.error_text:
        st.error(f"**Error:** {session.error_text}")

    if session.result_image is None:
        left, right = st.columns(2, gap="large")
        with left:
            upload_slot("1. Upload Person's Photo", 'person', on_person_selected, session.person_image)
        with right:
            upload_slot("2. Upload Necklace Photo", 'necklace', on_necklace_selected, session.necklace_image)

        _, middle, _ = st.columns([2, 1, 2])
        with middle:
            clicked = st.button(
                "Add Necklace",
                type="primary",
                disabled=not session.can_generate,
                width="stretch",
            )
        if clicked:
            run_generation(session)
            st.rerun()
    else:
        st.markdown(renderer.result(session.result_image), unsafe_allow_html=True)
        _, middle, _ = st.columns([2, 1, 2])
        with middle:
            st.button("Start Over", on_click=start_over, width="stretch")

    st.markdown(renderer.footer(), unsafe_allow_html=True)


main()
