import streamlit as st

from services import profile as profile_svc
from services.errors import ValidationError
from ui.components import profile_form, show_error, flash


def _render_onboarding(profile):
    st.markdown("Tell us a little about yourself so the assistant can tailor its suggestions.")
    values = profile_form(profile, key_prefix="onboarding", is_new=True)
    if values:
        try:
            profile_svc.complete_onboarding(**values)
        except ValidationError as e:
            show_error(e)
        else:
            flash("Welcome aboard!", "🎉")
            st.rerun()
    if st.button("Skip for now"):
        profile_svc.skip_onboarding()
        st.rerun()


def view():
    st.header("🙍 Founder Profile")
    profile = profile_svc.get_profile()

    if not profile.get('onboarded'):
        _render_onboarding(profile)
        return

    c1, c2 = st.columns([3, 1])
    c1.subheader(profile.get('name') or "Anonymous founder")
    c2.metric("Alignment", f"{profile_svc.alignment_average(profile)}/10")

    updated = profile_form(profile, key_prefix="profile_edit")
    if updated:
        try:
            profile_svc.save_profile(updated)
        except ValidationError as e:
            show_error(e)
        else:
            flash("Profile updated")
            st.rerun()

    with st.expander("Restart onboarding"):
        st.caption("Clears your profile and shows the onboarding flow again.")
        if st.button("Reset profile"):
            profile_svc.reset_profile()
            st.rerun()
