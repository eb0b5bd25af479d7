# FILE: pages/1_Roster.py
import streamlit as st
from team_core.config import SAMPLE_ROSTER_PATH
from team_core.io import load_roster_csv, save_roster_csv_bytes, generate_template_csv_bytes

st.title("1. Roster: Import & Export")
st.write("Upload a CSV with a `name` column to replace the participant list, or load the sample roster.")

if "setup" not in st.session_state:
    st.warning("Open the main page first so the setup is initialised.")
    st.stop()

setup = st.session_state.setup

uploaded_file = st.file_uploader("Upload roster CSV", type=["csv"])
if uploaded_file:
    try:
        names = load_roster_csv(uploaded_file.getvalue())
    except ValueError as e:
        st.error(str(e))
    else:
        st.success(f"Loaded {len(names)} participants.")
        if st.button("Use this roster"):
            st.session_state.setup = setup.model_copy(update={"participants": names})
            st.session_state.preset_name = "uploaded"
            st.rerun()

if st.button("Load sample roster"):
    with open(SAMPLE_ROSTER_PATH, "rb") as f:
        names = load_roster_csv(f.read())
    st.session_state.setup = setup.model_copy(update={"participants": names})
    st.session_state.preset_name = "sample"
    st.rerun()

st.subheader("Current participants")
if setup.participants:
    st.dataframe({"name": setup.participants}, use_container_width=True)
else:
    st.write("No participants yet.")

st.download_button("Download roster CSV", data=save_roster_csv_bytes(setup.participants), file_name="roster.csv")
st.download_button("Download empty template", data=generate_template_csv_bytes(), file_name="roster_template.csv")
