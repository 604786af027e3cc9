from services import voice


PITCH = "I'm building a Chrome extension for focus. I need to design the popup. Then I should ship it in 2 weeks."


def test_parse_full_pitch():
    parsed = voice.parse_voice_input(PITCH)
    assert parsed.type == "extension"
    assert parsed.title == "I'm building a Chrome extension for focus"
    assert parsed.purpose == "I need to design the popup"
    assert parsed.key_tasks == ["I need to design the popup", "I should ship it in 2 weeks"]
    assert parsed.timeline == "in 2 weeks"
    assert parsed.tags == ["extension"]
    assert parsed.status == "in-progress"


def test_long_title_is_truncated():
    parsed = voice.parse_voice_input("x" * 60)
    assert parsed.title == "x" * 47 + "..."
    assert len(parsed.title) == 50


def test_defaults_when_nothing_matches():
    parsed = voice.parse_voice_input("A quiet little website for bakers")
    assert parsed.type == "web-app"
    assert parsed.key_tasks == voice.DEFAULT_TASKS
    assert parsed.timeline is None
    assert parsed.status == "ideation"
    assert parsed.tags[-1] == "web app"


def test_mobile_detection_and_tags():
    parsed = voice.parse_voice_input("An iOS productivity app for runners")
    assert parsed.type == "mobile"
    assert "productivity" in parsed.tags
    assert "app" in parsed.tags
    assert parsed.tags[-1] == "mobile"


def test_at_most_four_unique_tasks():
    text = ". ".join(f"I will do thing number {i}" for i in range(6)) + ". I will do thing number 1."
    parsed = voice.parse_voice_input(text)
    assert len(parsed.key_tasks) == 4
    assert len(set(parsed.key_tasks)) == 4


def test_empty_transcript():
    parsed = voice.parse_voice_input("")
    assert parsed.title == "Voice Created Project"
    assert parsed.purpose == "Voice-created project"
