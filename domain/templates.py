"""Built-in project templates shown in the template library."""
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    type: str
    description: str
    tech_stack: Tuple[str, ...]
    sop_items: Tuple[str, ...]
    automations: Tuple[str, ...]
    created: str


TEMPLATES: List[Template] = [
    Template(
        id="web-app-saas",
        name="Web App SaaS Template",
        type="web-app",
        description="Complete SaaS web application with user auth, payments, and dashboard",
        tech_stack=("React", "TypeScript", "Tailwind", "Supabase", "Stripe"),
        sop_items=(
            "Market research & competitor analysis",
            "User persona definition",
            "MVP feature specification",
            "Database schema design",
            "UI/UX wireframes",
            "Authentication setup",
            "Payment integration",
            "Beta testing plan",
        ),
        automations=(
            "Launch announcement sequence",
            "User onboarding emails",
            "Product Hunt submission",
            "Social media posts",
        ),
        created="2024-01-15",
    ),
    Template(
        id="extension-template",
        name="Chrome Extension Template",
        type="extension",
        description="Productivity Chrome extension with content scripts and popup interface",
        tech_stack=("JavaScript", "Chrome APIs", "HTML/CSS", "Webpack"),
        sop_items=(
            "Extension concept validation",
            "Chrome Web Store guidelines review",
            "Manifest v3 configuration",
            "Content script development",
            "Popup interface design",
            "Chrome Web Store assets",
            "Beta testing with users",
            "Store submission process",
        ),
        automations=(
            "Chrome Web Store launch",
            "ProductHunt submission",
            "Twitter announcement thread",
            "Email to subscriber list",
        ),
        created="2024-01-20",
    ),
    Template(
        id="mobile-app-template",
        name="Mobile App Template",
        type="mobile",
        description="Cross-platform mobile app with native features and cloud backend",
        tech_stack=("React Native", "Expo", "TypeScript", "Firebase", "Redux"),
        sop_items=(
            "Mobile market research",
            "App Store optimization plan",
            "Cross-platform compatibility testing",
            "Push notification setup",
            "App store assets creation",
            "iOS/Android store guidelines",
            "TestFlight/Play Console beta",
            "Store submission & review",
        ),
        automations=(
            "App store launch sequence",
            "Press release distribution",
            "Influencer outreach campaign",
            "Social media announcement",
        ),
        created="2024-01-25",
    ),
]


def get_template(template_id: str) -> Optional[Template]:
    return next((t for t in TEMPLATES if t.id == template_id), None)
