"""Streamlit front end for the complaint reply assistant."""

from __future__ import annotations

import asyncio
from typing import Any

import streamlit as st
import streamlit.components.v1 as components

from reply_assistant.form_state import ComplaintForm
from reply_assistant.responder import new_form


APP_TITLE = "Asisten Layanan Pelanggan AI"
ALLOWED_IMAGE_TYPES = ["png", "jpg", "jpeg", "webp", "gif"]


def init_state() -> None:
    if "form" not in st.session_state:
        st.session_state.form = new_form()
    st.session_state.setdefault("attached_signature", None)


def get_form() -> ComplaintForm:
    return st.session_state.form


def upload_signature(uploaded: Any) -> tuple[str, int]:
    """Identify an upload across reruns so it is only attached once."""

    return (getattr(uploaded, "name", "upload"), getattr(uploaded, "size", 0))


def sync_upload(form: ComplaintForm, uploaded: Any) -> None:
    """Attach a newly selected file, or drop the attachment when the picker is cleared."""

    if uploaded is None:
        if form.attachment is not None:
            form.remove_image()
        st.session_state.attached_signature = None
        return

    signature = upload_signature(uploaded)
    if signature == st.session_state.attached_signature:
        return
    st.session_state.attached_signature = signature
    form.attach_image(uploaded.name, uploaded.type, uploaded.getvalue())


def scroll_to_result(delay_ms: int) -> None:
    components.html(
        f"""
        <script>
        setTimeout(function () {{
            var anchor = window.parent.document.getElementById("reply-result");
            if (anchor) {{ anchor.scrollIntoView({{behavior: "smooth"}}); }}
        }}, {delay_ms});
        </script>
        """,
        height=0,
    )


# --------------------------- STREAMLIT UI ---------------------------

st.set_page_config(page_title=APP_TITLE, layout="centered")
init_state()
form = get_form()

st.title(APP_TITLE)
st.caption("AI akan membantu mengembangkan jawaban inti Anda menjadi respons yang formal dan solutif.")

with st.container(border=True):
    complaint_text = st.text_area(
        "1. Tuliskan keluhan atau lampirkan foto:",
        value=form.complaint.text,
        height=120,
        placeholder="Contoh: Pesanan saya belum sampai padahal sudah lewat estimasi...",
        disabled=form.is_loading,
    )
    form.update_complaint(complaint_text)

    uploaded = st.file_uploader(
        "Lampirkan Foto (Opsional)",
        type=ALLOWED_IMAGE_TYPES,
        key=f"image_uploader_{form.uploader_token}",
        disabled=form.is_loading,
    )
    sync_upload(form, uploaded)

    if form.attachment is not None:
        st.image(form.attachment.content, caption="Pratinjau Komplain", width=240)
        if st.button("Hapus gambar", key="remove_image"):
            form.remove_image()
            st.session_state.attached_signature = None
            st.rerun()

    core_answer = st.text_area(
        "2. Masukkan inti jawaban Anda:",
        value=form.core_answer,
        height=120,
        placeholder="Contoh: Kami akan kirim ulang barangnya hari ini juga.",
        disabled=form.is_loading,
    )
    form.update_core_answer(core_answer)

    reset_col, submit_col = st.columns([1, 1])
    with reset_col:
        if st.button("Reset", use_container_width=True):
            form.reset()
            st.session_state.attached_signature = None
            st.rerun()
    with submit_col:
        submit_clicked = st.button(
            "Generate Jawaban",
            type="primary",
            disabled=not form.can_submit,
            use_container_width=True,
        )

if submit_clicked:
    with st.spinner("Memproses"):
        asyncio.run(form.submit())

if form.error:
    st.error(form.error, icon="⚠️")

if form.result:
    st.markdown('<div id="reply-result"></div>', unsafe_allow_html=True)
    with st.container(border=True):
        st.subheader("Jawaban dari Asisten AI")
        # The code block carries Streamlit's own copy button, which writes the
        # clipboard inside the click itself
        st.code(form.result, language=None, wrap_lines=True)

    if form.consume_scroll_request():
        scroll_to_result(form.scroll_delay_ms)

st.markdown(
    '<div class="small">Dibuat dengan Streamlit dan Gemini API.</div>',
    unsafe_allow_html=True,
)
