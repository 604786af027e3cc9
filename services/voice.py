"""Turn a free-form spoken/typed project pitch into a structured project draft.

Pure keyword heuristics; no speech recognition happens here, the transcript
is whatever the user dictated or pasted.
"""
from dataclasses import dataclass, field
from typing import List, Optional
import re

PURPOSE_KEYWORDS = ["goal", "purpose", "want to", "need to", "trying to", "building", "creating"]
TASK_KEYWORDS = ["task", "todo", "need to", "should", "must", "will", "plan to"]
COMMON_TAGS = ["saas", "ai", "productivity", "social", "ecommerce", "content", "marketing", "tool", "app", "web"]
DEFAULT_TASKS = [
    "Research and plan the project",
    "Create initial design and wireframes",
    "Start development",
]
MAX_TASKS = 4
MAX_TITLE = 50

_SENTENCE_SPLIT = re.compile(r'[.!?]+')
_TASK_PREFIX = re.compile(r'^(and |then |also |next )', re.IGNORECASE)
_TIMELINE = re.compile(r'(in \d+ \w+|by \w+|next \w+|this \w+|deadline|due)', re.IGNORECASE)


@dataclass
class ParsedProject:
    title: str
    type: str
    purpose: str
    key_tasks: List[str] = field(default_factory=list)
    timeline: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    status: str = "ideation"


def detect_type(text: str) -> str:
    text = text.lower()
    if any(k in text for k in ("extension", "chrome", "browser")):
        return "extension"
    if any(k in text for k in ("mobile", "app", "ios", "android")):
        return "mobile"
    return "web-app"


def _title(sentences: List[str]) -> str:
    title = sentences[0].strip() if sentences else ''
    if not title:
        return "Voice Created Project"
    if len(title) > MAX_TITLE:
        title = title[:MAX_TITLE - 3] + "..."
    return title


def _purpose(transcript: str, sentences: List[str]) -> str:
    text = transcript.lower()
    for keyword in PURPOSE_KEYWORDS:
        if keyword in text:
            sentence = next((s for s in sentences if keyword in s.lower()), None)
            if sentence:
                return sentence.strip()
    return transcript.split('.')[0].strip() or "Voice-created project"


def _tasks(sentences: List[str]) -> List[str]:
    tasks: List[str] = []
    for sentence in sentences:
        lowered = sentence.lower()
        if not any(k in lowered for k in TASK_KEYWORDS):
            continue
        clean = _TASK_PREFIX.sub('', sentence.strip())
        if len(clean) > 5 and clean not in tasks:
            tasks.append(clean)
    return tasks[:MAX_TASKS] if tasks else list(DEFAULT_TASKS)


def parse_voice_input(transcript: str) -> ParsedProject:
    transcript = transcript or ''
    text = transcript.lower()
    sentences = _SENTENCE_SPLIT.split(transcript)
    project_type = detect_type(text)

    timeline_match = _TIMELINE.search(transcript)

    tags = [tag for tag in COMMON_TAGS if tag in text]
    tags.append(project_type.replace("-", " "))

    status = "ideation"
    if any(k in text for k in ("started", "working on", "building")):
        status = "in-progress"

    return ParsedProject(
        title=_title(sentences),
        type=project_type,
        purpose=_purpose(transcript, sentences),
        key_tasks=_tasks(sentences),
        timeline=timeline_match.group(0) if timeline_match else None,
        tags=tags,
        status=status,
    )
