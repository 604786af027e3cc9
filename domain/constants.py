"""
Centralized constants for the dashboard: enumerations shared by the models,
the services and the views, plus the onboarding choice lists.
"""
import os

APP_TITLE = "Polypreneur OS"

LOG_LEVEL = os.environ.get("POLYPRENEUR_LOG_LEVEL", "INFO").upper()

PROJECT_TYPES = ["web-app", "extension", "mobile"]

# Kanban column order
PROJECT_STATUSES = ["ideation", "in-progress", "ready-to-launch", "launched"]

STATUS_LABELS = {
    "ideation": "Ideation",
    "in-progress": "In Progress",
    "ready-to-launch": "Ready to Launch",
    "launched": "Launched",
}

TYPE_ICONS = {
    "web-app": "🌐",
    "extension": "🔌",
    "mobile": "📱",
}

IDEA_CATEGORIES = ["saas", "coaching", "content", "physical", "service"]

IDEA_STATUSES = ["idea", "validated", "killed", "converted"]

# mood / energy / energy_level / priority all share this scale
LEVELS = ["high", "medium", "low"]

LEVEL_SCORES = {"high": 3, "medium": 2, "low": 1}

EXPERIENCE_LEVELS = ["beginner", "intermediate", "advanced"]

GOALS = [
    "Launch my first digital product",
    "Scale my existing business",
    "Build a portfolio of products",
    "Validate more ideas faster",
    "Improve my productivity",
    "Learn new skills",
    "Generate passive income",
    "Build an audience",
]

INTERESTS = [
    "SaaS", "Mobile Apps", "E-commerce", "Content", "Coaching",
    "Physical Products", "Services", "AI/ML", "Web3", "Design",
]

EXPERIMENT_STATUSES = ["planned", "running", "completed"]

SENTIMENTS = ["positive", "neutral", "negative"]

STRATEGY_FRAMEWORKS = {
    "lean_canvas": ("Lean Canvas", "9-block strategic planning tool"),
    "swot_analysis": ("SWOT Analysis", "Strengths, Weaknesses, Opportunities, Threats"),
    "business_model": ("Business Model Canvas", "Complete business model visualization"),
    "personas": ("Customer Personas", "Detailed customer persona profiles"),
    "effort_impact_grid": ("Effort-Impact Grid", "Feature and task prioritization"),
}
