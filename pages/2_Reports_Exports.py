# FILE: pages/2_Reports_Exports.py
import streamlit as st
from team_core.io import setup_to_yaml
from team_core.reports import assignment_csv_bytes, assignment_table_df, distribution_dashboard_df
from team_core.export_pdf import render_pdf

st.title("2. Reports & Exports")

if "setup" in st.session_state:
    st.download_button(
        "Download setup YAML",
        data=setup_to_yaml(st.session_state.setup),
        file_name="setup.yaml",
    )

groups = st.session_state.get("groups")
if not groups:
    st.warning("No groups assigned yet. Assign groups on the main page first.")
    st.stop()

st.download_button("Download groups CSV", data=assignment_csv_bytes(groups), file_name="groups.csv")

pdf_bytes = render_pdf("Group Assignment", assignment_table_df(groups))
st.download_button("Download printable groups (PDF)", data=pdf_bytes, file_name="groups.pdf", mime="application/pdf")

stats = st.session_state.get("stats")
if stats:
    dash = distribution_dashboard_df(stats, st.session_state.get("stats_iterations", 1))
    st.download_button(
        "Download fairness test CSV",
        data=dash.to_csv(index=False).encode("utf-8"),
        file_name="fairness_test.csv",
    )
