"""
Streamlit frontend for the Viral Creative Lab.

This is the main entry point for the application. It renders the campaign UI
and wires the five user actions (analyze, lifestyle photo, hero video, viral
script, B-roll) to the CampaignSession kept in st.session_state.

Environment Variables:
- GEMINI_API_KEY (or GOOGLE_GENAI_API_KEY / API_KEY): Required for Gemini calls
- GEMINI_ANALYSIS_MODEL: (Optional) analysis model (default: gemini-3-flash-preview)
- GEMINI_IMAGE_MODEL: (Optional) image model (default: gemini-2.5-flash-image)
- GEMINI_TEXT_MODEL: (Optional) script / B-roll model (default: gemini-3-pro-preview)
- VEO_MODEL: (Optional) video model (default: veo-3.1-fast-generate-preview)
- GEMINI_THINK_BUDGET: (Optional) Thinking budget for the script model (in tokens)
- CREATIVE_LAB_LOG_LEVEL: (Optional) log level (default: INFO)
"""

import streamlit as st
from dotenv import load_dotenv

# Import all modular components
from creative_lab import (
    BILLING_DOCS_URL,
    CampaignSession,
    build_campaign_brief,
    data_url_to_bytes,
    get_api_key,
    load_image_bytes,
    pdf_for_brief,
    render_pdf,
    to_data_url,
)

# Load environment variables from .env file
load_dotenv()

# ---------- Streamlit Page Configuration ----------
st.set_page_config(
    page_title="Viral Creative Lab",
    page_icon="⚡",
    layout="wide"
)

# ---------- Sidebar Label Hack: Show "Lab ⚡" Instead of File Name ----------
st.markdown(
    """
    <style>
    [data-testid="stSidebarNav"] li:first-child a span {
        visibility: hidden;
    }
    [data-testid="stSidebarNav"] li:first-child a span::after {
        content: '⚡ Lab';
        visibility: visible;
        display: inline-block;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------- Session State ----------
if "campaign" not in st.session_state:
    st.session_state["campaign"] = CampaignSession()
session: CampaignSession = st.session_state["campaign"]


@st.dialog("⭐ Unlock Pro Features")
def upgrade_dialog():
    st.markdown("_Advanced video generation and unlimited assets require a paid API key._")
    st.markdown("✅ **Hero Video Generation**: Access to Veo 3.1 high-fidelity video engine.")
    st.markdown("✅ **Unlimited Credits**: No more daily usage limits on AI analysis.")
    paid_key = st.text_input(
        "Paid Gemini API Key",
        type="password",
        help="A key from a Google AI Studio project with billing enabled"
    )
    if st.button("🔑 Link Paid API Key", type="primary", use_container_width=True):
        if session.upgrade(paid_key):
            st.rerun()
        st.warning("⚠️ Please enter a paid API key.")
    st.markdown(f"[View Billing Documentation]({BILLING_DOCS_URL})")


def flush_toast():
    if session.toast:
        st.toast(session.toast)
        session.dismiss_toast()


# ---------- Main UI ----------
st.title("⚡ Viral Creative Lab")
badge = "🟢" if session.credits > 0 else "🔴"
st.markdown(f"_AI-First Creative Suite for Modern E-Commerce._ &nbsp; {badge} **{session.credits} Credits Left**")

# ---------- Sidebar: Environment Configuration ----------
with st.sidebar:
    st.markdown("**API Keys & Settings**")
    if get_api_key():
        st.caption("✅ Gemini API key loaded from environment")
    else:
        st.warning("⚠️ No GEMINI_API_KEY found. Add it to your environment or .env file.")
    if session.has_pro:
        st.caption("⭐ Pro unlocked: paid key linked")
    elif st.button("⭐ Unlock Pro", use_container_width=True):
        session.open_upgrade_modal()

    st.markdown("**Campaign**")
    if session.original_image:
        if st.button("🆕 New Campaign", use_container_width=True):
            session.new_campaign()
            st.session_state.pop("last_upload_id", None)
            st.session_state.pop("brief_pdf", None)
            st.rerun()
    else:
        if st.button("🧪 Try Sample Product", use_container_width=True):
            with st.spinner("Loading sample product and analyzing..."):
                session.load_sample()
            st.rerun()

col_input, col_output = st.columns([1, 2.4], gap="large")

# ---------- Section 1: Input & Intel ----------
with col_input:
    st.header("1️⃣ Input")
    uploaded = st.file_uploader(
        "Upload Product",
        type=["png", "jpg", "jpeg", "webp"],
        help="Studio lighting recommended"
    )
    if uploaded and st.session_state.get("last_upload_id") != uploaded.file_id:
        st.session_state["last_upload_id"] = uploaded.file_id
        image_bytes, mime = load_image_bytes(uploaded)
        with st.spinner("🔍 Analyzing your product..."):
            session.upload_image(to_data_url(image_bytes, mime))
        st.rerun()

    if session.original_image:
        original_bytes, _ = data_url_to_bytes(session.original_image)
        st.image(original_bytes, caption="Your product photo", width="stretch")

        ready = session.analysis is not None
        if st.button("🎬 Generate Hero Video (PRO)", type="primary", disabled=not ready, use_container_width=True):
            if not session.has_pro:
                session.open_upgrade_modal()
            else:
                with st.status("Generating hero video...", expanded=True) as status:
                    status.write("High-quality video synthesis in progress. This takes approximately 2-3 minutes.")
                    ok = session.generate_video(on_status=lambda msg: status.update(label=msg))
                    status.update(
                        label="✅ Hero video ready!" if ok else "❌ Video generation failed",
                        state="complete" if ok else "error",
                    )
                st.rerun()
        if st.button("🖼️ Lifestyle Photo", disabled=not ready, use_container_width=True):
            with st.spinner("Rendering lifestyle photo..."):
                session.generate_image()
            st.rerun()
        col_script, col_broll = st.columns(2)
        with col_script:
            if st.button("✍️ Viral Script", disabled=not ready, use_container_width=True):
                with st.spinner("Writing script..."):
                    session.write_script()
                st.rerun()
        with col_broll:
            if st.button("🎞️ B-Roll", disabled=not ready, use_container_width=True):
                with st.spinner("Ideating B-roll..."):
                    session.ideate_broll()
                st.rerun()

    st.header("2️⃣ Intel")
    analysis = session.analysis
    if analysis:
        st.markdown("**Product Identity**")
        st.markdown(f"### {analysis.product_name}")
        st.caption(analysis.product_type)
        col_palette, col_materials = st.columns(2)
        with col_palette:
            st.markdown("**Palette**")
            st.markdown(" ".join(f"`{c}`" for c in analysis.primary_colors) or "-")
        with col_materials:
            st.markdown("**Materials**")
            st.markdown(" ".join(f"`{m}`" for m in analysis.materials) or "-")
        st.markdown("**Core Persona**")
        st.info(f'"{analysis.target_audience}"')
    else:
        st.caption("WAITING FOR UPLOAD")

# ---------- Section 2: Generated Assets ----------
with col_output:
    st.header("3️⃣ Campaign Assets")
    assets = session.assets

    col_video, col_side = st.columns(2)
    with col_video:
        st.subheader("🎬 Veo Hero Video")
        if assets.product_video:
            st.video(assets.product_video, loop=True, autoplay=True)
            st.download_button(
                "📥 Download MP4",
                data=assets.product_video,
                file_name="product-hero.mp4",
                mime="video/mp4",
                use_container_width=True,
            )
        else:
            st.caption("VIDEO ENGINE OFFLINE" if not session.has_pro else "No hero video yet")
            if not session.has_pro and st.button("Unlock Pro", key="unlock_pro_video"):
                session.open_upgrade_modal()

    with col_side:
        st.subheader("🖼️ Lifestyle Asset")
        if assets.lifestyle_image:
            lifestyle_bytes, _ = data_url_to_bytes(assets.lifestyle_image)
            st.image(lifestyle_bytes, width="stretch")
            st.download_button(
                "📥 Download PNG",
                data=lifestyle_bytes,
                file_name="lifestyle.png",
                mime="image/png",
                use_container_width=True,
            )
        else:
            st.caption("IMAGE SANDBOX")

        st.subheader("✍️ Viral Script")
        if assets.tiktok_script:
            st.code(assets.tiktok_script, language=None, wrap_lines=True)
        else:
            st.caption("SCRIPT SANDBOX")

    st.subheader("🎞️ Supplement B-Roll (Veo Prompts)")
    if assets.broll_concepts:
        scene_cols = st.columns(len(assets.broll_concepts))
        for idx, (col, concept) in enumerate(zip(scene_cols, assets.broll_concepts), start=1):
            with col:
                st.markdown(f"**Scene {idx:02d}**")
                # st.code renders a copy-to-clipboard control
                st.code(concept, language=None, wrap_lines=True)
    elif assets.broll_concepts is not None:
        st.caption("The model returned no usable B-roll concepts. Try again.")
    else:
        st.caption("CINEMATICS MODULE OFFLINE")

    if analysis:
        with st.expander("📋 Campaign Brief"):
            brief_md = build_campaign_brief(analysis, assets.tiktok_script, assets.broll_concepts)
            st.markdown(brief_md)
            col_md, col_pdf = st.columns(2)
            with col_md:
                st.download_button(
                    "📥 Download Markdown",
                    data=brief_md,
                    file_name="campaign-brief.md",
                    mime="text/markdown",
                    use_container_width=True,
                )
            with col_pdf:
                if st.button("📄 Prepare PDF", use_container_width=True):
                    try:
                        pdf = render_pdf(brief_md, title=f"{analysis.product_name} Campaign Brief")
                        st.session_state["brief_pdf"] = (brief_md, pdf)
                    except Exception as exc:
                        st.error(f"PDF export failed: {exc}")
                cached_pdf = pdf_for_brief(st.session_state.get("brief_pdf"), brief_md)
                if cached_pdf:
                    st.download_button(
                        "📥 Download PDF",
                        data=cached_pdf,
                        file_name="campaign-brief.pdf",
                        mime="application/pdf",
                        use_container_width=True,
                    )

# ---------- Notifications & Modal ----------
flush_toast()
if session.show_upgrade_modal:
    session.close_upgrade_modal()
    upgrade_dialog()

st.caption("Built with Streamlit + Google Gemini AI + Veo. Set GEMINI_API_KEY in your environment to get started.")
