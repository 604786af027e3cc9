import streamlit as st

from services import dashboard as dash_svc, persistence
from ui.components import flash

RESET_CONFIRMATION = "ERASE ALL DATA"


def view():
    st.header("💾 Data")
    st.caption(f"Stored as JSON in `{persistence.DATA_DIR}`")

    with st.container(border=True):
        st.subheader("Sample data")
        st.write("Adds three sample projects, three scored ideas and two weeks of check-ins and reflections.")
        if st.button("Load sample data"):
            added = dash_svc.load_sample_data()
            flash(f"Added {sum(added.values())} sample records")
            st.rerun()

    with st.container(border=True):
        st.subheader("Export (CSV)")
        cols = st.columns(len(dash_svc.EXPORTABLE_KEYS))
        for col, key in zip(cols, dash_svc.EXPORTABLE_KEYS):
            data = dash_svc.export_to_csv(key)
            col.download_button(f"{key}.csv", data, f"{key}.csv", "text/csv", disabled=not data,
                                key=f"export_{key}")

    with st.expander("🚨 Danger Zone: reset all data"):
        st.warning("This permanently deletes every project, idea, check-in, reflection and your profile.")
        if st.checkbox("I understand this cannot be undone."):
            if st.text_input(f"Type '{RESET_CONFIRMATION}' to confirm.") == RESET_CONFIRMATION:
                if st.button("Delete everything", type="primary"):
                    dash_svc.reset_all_data()
                    flash("All data deleted", "🗑️")
                    st.rerun()
