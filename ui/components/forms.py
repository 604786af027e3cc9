import streamlit as st
from typing import Dict, Any, Optional

from domain.constants import LEVELS, EXPERIENCE_LEVELS, GOALS, INTERESTS

MOOD_LABELS = {"high": "😄 High", "medium": "🙂 Medium", "low": "😔 Low"}
ENERGY_LABELS = {"high": "⚡ High", "medium": "🔋 Medium", "low": "🪫 Low"}


def _level_index(value: Optional[str]) -> int:
    return LEVELS.index(value) if value in LEVELS else 1


def check_in_form(existing: Optional[Dict[str, Any]] = None, key_prefix: str = "checkin") -> Optional[Dict[str, Any]]:
    """
    Morning check-in: mood, energy and today's focus.

    Returns the submitted values or None. Validation (empty focus) is left to
    services.rituals so the error title matches everywhere.
    """
    existing = existing or {}
    with st.form(f"form_{key_prefix}"):
        mood = st.radio("How's your mood?", LEVELS, index=_level_index(existing.get('mood')),
                        format_func=MOOD_LABELS.get, horizontal=True, key=f"{key_prefix}_mood")
        energy = st.radio("Energy level?", LEVELS, index=_level_index(existing.get('energy')),
                          format_func=ENERGY_LABELS.get, horizontal=True, key=f"{key_prefix}_energy")
        focus = st.text_input("Today's main focus", value=existing.get('focus', ''), key=f"{key_prefix}_focus",
                              placeholder="What's the one thing that matters today?")
        reflection = st.text_area("Anything on your mind? (optional)", value=existing.get('reflection', ''),
                                  key=f"{key_prefix}_reflection")
        submitted = st.form_submit_button("Save check-in" if not existing else "Update check-in")
    if submitted:
        return {'mood': mood, 'energy': energy, 'focus': focus, 'reflection': reflection}
    return None


def reflection_form(existing: Optional[Dict[str, Any]] = None, key_prefix: str = "reflection") -> Optional[Dict[str, Any]]:
    existing = existing or {}
    with st.form(f"form_{key_prefix}"):
        accomplishments = st.text_area("What did you accomplish today?",
                                       value=existing.get('accomplishments', ''), key=f"{key_prefix}_acc")
        c1, c2 = st.columns(2)
        tasks_completed = c1.number_input("Tasks completed", min_value=0, max_value=20,
                                          value=int(existing.get('tasks_completed', 0)), key=f"{key_prefix}_tasks")
        satisfaction = c2.slider("Satisfaction", 1, 10, int(existing.get('satisfaction_level', 7)),
                                 key=f"{key_prefix}_sat")
        focus_achieved = c1.slider("Focus achieved", 1, 10, int(existing.get('focus_achieved', 5)),
                                   key=f"{key_prefix}_focus")
        energy_used = c2.slider("Energy used", 1, 10, int(existing.get('energy_used', 5)),
                                key=f"{key_prefix}_energy")
        challenges = st.text_area("Challenges", value=existing.get('challenges', ''), key=f"{key_prefix}_ch")
        tomorrow = st.text_input("Tomorrow's priority", value=existing.get('tomorrow_priority', ''),
                                 key=f"{key_prefix}_tomorrow")
        submitted = st.form_submit_button("Save reflection")
    if submitted:
        return {
            'accomplishments': accomplishments,
            'tasks_completed': tasks_completed,
            'focus_achieved': focus_achieved,
            'energy_used': energy_used,
            'challenges': challenges,
            'tomorrow_priority': tomorrow,
            'satisfaction_level': satisfaction,
        }
    return None


def profile_form(profile: Dict[str, Any], key_prefix: str, is_new: bool = False) -> Optional[Dict[str, Any]]:
    """
    Renders the founder profile form for both onboarding and later edits.

    Args:
        profile (Dict[str, Any]): Current profile values used as defaults.
        key_prefix (str): A unique prefix for Streamlit widget keys.
        is_new (bool): Onboarding variant (shorter, no mission/alignment fields).

    Returns:
        Dict[str, Any]: The submitted values, or None if not submitted.
    """
    with st.form(f"form_{key_prefix}"):
        st.subheader("Step 1: About you" if is_new else "About you")
        name = st.text_input("Name", value=profile.get('name', ''), key=f"{key_prefix}_name")
        role = st.text_input("Role", value=profile.get('role', ''), key=f"{key_prefix}_role",
                             placeholder="Indie hacker, designer, consultant...")
        exp = profile.get('experience')
        experience = st.selectbox("Experience", EXPERIENCE_LEVELS,
                                  index=EXPERIENCE_LEVELS.index(exp) if exp in EXPERIENCE_LEVELS else 0,
                                  format_func=str.capitalize, key=f"{key_prefix}_exp")

        st.subheader("Step 2: Goals & interests" if is_new else "Goals & interests")
        goals = st.multiselect("Goals", GOALS, default=[g for g in profile.get('goals', []) if g in GOALS],
                               key=f"{key_prefix}_goals")
        interests = st.multiselect("Interests", INTERESTS,
                                   default=[i for i in profile.get('interests', []) if i in INTERESTS],
                                   key=f"{key_prefix}_interests")

        values: Dict[str, Any] = {}
        if not is_new:
            st.subheader("Mission & alignment")
            values['mission'] = st.text_area("Mission", value=profile.get('mission') or '', key=f"{key_prefix}_mission")
            values['vision'] = st.text_area("Vision", value=profile.get('vision') or '', key=f"{key_prefix}_vision")
            values['anti_vision'] = st.text_area("Anti-vision (what you refuse to become)",
                                                 value=profile.get('anti_vision') or '', key=f"{key_prefix}_anti")
            scores = profile.get('alignment_scores') or {}
            cols = st.columns(3)
            values['alignment_scores'] = {
                k: cols[i].slider(k.capitalize(), 1, 10, int(scores.get(k, 5)), key=f"{key_prefix}_align_{k}")
                for i, k in enumerate(('clarity', 'energy', 'confidence'))
            }

        submitted = st.form_submit_button("Finish onboarding" if is_new else "Save")

    if submitted:
        values.update({'name': name, 'role': role, 'experience': experience,
                       'goals': goals, 'interests': interests})
        return values
    return None
