# Streamlit front end for the prompt studio
import logging
import random
from typing import Dict, Optional, Tuple

import streamlit as st

import config
from prompt_engine import (
    MAX_FEATURES,
    FormData,
    compose,
    export_filename,
    is_ready,
    new_generated_prompt,
    record_label,
    split_features,
)
from prompt_store import StorageWriteFailed, open_store
from templates import MUSIC_MOOD_PROMPTS, PRODUCT_TEMPLATES, RANDOM_SLOGANS, VISUAL_STYLE_PROMPTS

config.setup_logging()
logger = logging.getLogger(__name__)


st.set_page_config(
    page_title="AI Video Prompt Studio",
    page_icon="🎬",
    layout="wide",
)

FORM_DEFAULTS: Dict[str, str] = {
    "product_name": "",
    "features_text": "",
    "visual_style": "minimalist",
    "music_mood": "ambient",
    "slogan": "",
    "custom_instructions": "",
}


def _inject_style() -> None:
    st.markdown(
        """
        <style>
        :root {
            --card: rgba(255, 255, 255, 0.92);
            --text: #0f172a;
            --accent: #7c3aed;
            --accent-2: #2563eb;
        }

        .hero {
            padding: 24px 28px 18px 28px;
            border-radius: 18px;
            background: linear-gradient(120deg, rgba(124, 58, 237, 0.18), rgba(37, 99, 235, 0.14));
            border: 1px solid rgba(15, 23, 42, 0.08);
        }

        .hero h1 {
            margin: 0 0 6px 0;
            color: var(--text);
        }

        .hero .tag {
            display: inline-block;
            padding: 2px 10px;
            border-radius: 999px;
            background: var(--accent);
            color: #ffffff;
            font-size: 12px;
            letter-spacing: 0.08em;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _init_form_state() -> None:
    for key, value in FORM_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = value


def _apply_template() -> None:
    name = st.session_state["template_name"]
    preset = PRODUCT_TEMPLATES[name]
    st.session_state["product_name"] = name
    st.session_state["features_text"] = "\n".join(preset["features"])
    st.session_state["visual_style"] = preset["visual_style"]
    st.session_state["music_mood"] = preset["music_mood"]
    st.session_state["slogan"] = preset["slogan"]


def _random_slogan() -> None:
    st.session_state["slogan"] = random.choice(RANDOM_SLOGANS)


def _flash(kind: str, message: str) -> None:
    st.session_state["flash"] = (kind, message)


def _delete_prompt(record_id: str) -> None:
    try:
        open_store().delete_by_id(record_id)
        _flash("success", "Prompt removed from your library.")
    except StorageWriteFailed as exc:
        logger.error("Delete failed: %s", exc)
        _flash("error", f"Could not delete the prompt: {exc}")


def _current_form() -> FormData:
    return FormData(
        product_name=st.session_state["product_name"],
        features=split_features(st.session_state["features_text"]),
        visual_style=st.session_state["visual_style"],
        music_mood=st.session_state["music_mood"],
        slogan=st.session_state["slogan"] or None,
        custom_instructions=st.session_state["custom_instructions"] or None,
    )


def _preview_for(form: FormData) -> str:
    # Recompose only when the form changes so Save stores the text on screen.
    snapshot = form.to_dict()
    if st.session_state.get("preview_form") != snapshot:
        st.session_state["preview_form"] = snapshot
        st.session_state["preview_text"] = compose(form)
    return st.session_state["preview_text"]


_inject_style()
_init_form_state()

st.markdown(
    """
    <div class="hero">
        <div class="tag">PROMPT STUDIO</div>
        <h1>AI Video Prompt Studio</h1>
        <p>Describe a product once and get a ready-to-paste prompt for AI video generators.</p>
    </div>
    """,
    unsafe_allow_html=True,
)
st.write("")

flash: Optional[Tuple[str, str]] = st.session_state.pop("flash", None)
if flash:
    kind, message = flash
    (st.success if kind == "success" else st.error)(message)

with st.sidebar:
    st.subheader("📋 Quick templates")
    st.selectbox("Template", list(PRODUCT_TEMPLATES.keys()), key="template_name")
    st.button("Use template", on_click=_apply_template, key="apply_template")

    st.divider()
    st.subheader("🧾 Product")
    st.text_input("Product name", key="product_name")
    st.text_area(
        f"Key features (one per line, up to {MAX_FEATURES})",
        key="features_text",
        height=120,
    )
    st.selectbox("Visual style", list(VISUAL_STYLE_PROMPTS.keys()), key="visual_style")
    st.selectbox("Music mood", list(MUSIC_MOOD_PROMPTS.keys()), key="music_mood")
    st.text_input("Slogan (optional)", key="slogan")
    st.button("🎲 Random slogan", on_click=_random_slogan, key="random_slogan")
    st.text_area("Custom instructions (optional)", key="custom_instructions", height=100)

form = _current_form()

left, right = st.columns([1.3, 1])

with left:
    st.subheader("🎥 Generated prompt")
    if is_ready(form):
        prompt = _preview_for(form)
        st.caption(f"{form.visual_style} · {form.music_mood}")
        st.code(prompt, language=None)

        save_col, download_col = st.columns(2)
        with save_col:
            if st.button("Save to library", key="save_prompt"):
                record = new_generated_prompt(form, prompt=prompt)
                try:
                    open_store().save(record)
                    st.success("Prompt saved to your library.")
                except StorageWriteFailed as exc:
                    logger.error("Save failed: %s", exc)
                    st.error(f"Could not save the prompt: {exc}")
        with download_col:
            st.download_button(
                "Download .txt",
                data=prompt,
                file_name=export_filename(form.product_name),
                mime="text/plain",
                key="download_prompt",
            )
    else:
        st.info("Enter a product name and at least one feature to see the prompt.")

with right:
    st.subheader("📚 Saved prompts")
    saved = open_store().list()
    if not saved:
        st.caption("Saved prompts will show up here.")
    for record in saved:
        with st.expander(record_label(record)):
            st.caption(f"{record.metadata.visual_style} · {record.metadata.music_mood}")
            st.code(record.prompt, language=None)
            st.button(
                "Delete",
                key=f"delete_{record.id}",
                on_click=_delete_prompt,
                args=(record.id,),
            )
