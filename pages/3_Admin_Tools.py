# FILE: pages/3_Admin_Tools.py
import streamlit as st
import yaml
from team_core.config import SETUPS_PATH, ensure_assets_exist
from team_core.io import load_setups_yaml, save_setups_yaml
from team_core.validation import run_self_test

st.title("3. Admin & Self-Test")

if st.button("Run Self-Test"):
    results = run_self_test()
    for name, ok in results["tests"]:
        (st.success if ok else st.error)(name)

st.subheader("Presets")
ensure_assets_exist()
with open(SETUPS_PATH, "r", encoding="utf-8") as f:
    current = f.read()
text = st.text_area("setups.yaml", value=current, height=400)
if st.button("Save presets"):
    try:
        save_setups_yaml(SETUPS_PATH, text)
    except (ValueError, yaml.YAMLError) as e:
        st.error(f"Presets not saved: {e}")
    else:
        st.session_state.presets = load_setups_yaml(SETUPS_PATH)
        st.success("Presets saved.")

if "app_config" in st.session_state:
    st.subheader("Run configuration")
    st.json(st.session_state.app_config.model_dump())
