"""Keyword rule tables used to infer an activity category."""

from __future__ import annotations

from time_analyzer.schema import Category

# Evaluated top to bottom; the first category with a contained keyword wins.
CATEGORY_RULES: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (
        Category.MEETINGS,
        (
            "call", "sync", "meeting", "standup", "catch-up", "catchup", "interview",
            "workshop", "session", "1:1", "one-on-one", "conference", "webinar",
        ),
    ),
    (
        Category.RESEARCH,
        (
            "research", "documentation", "write", "draft", "review", "read",
            "analyze", "analysis", "report", "document", "study", "explore",
            "investigation", "learn", "notes", "writing", "wiki",
        ),
    ),
    (
        Category.DEVELOPMENT,
        (
            "test", "develop", "code", "debug", "programming", "deployment",
            "feature", "fix", "build", "implementation", "coding", "testing",
            "qa", "architecture", "design system", "technical", "engineering",
        ),
    ),
    (
        Category.PLANNING,
        (
            "plan", "strategy", "prep", "roadmap", "goal", "okr", "vision",
            "initiative", "objective", "priority", "planning", "strategic",
            "forecast", "budget", "scope", "requirements",
        ),
    ),
    (
        Category.COMMUNICATION,
        (
            "message", "response", "coordination", "email", "slack", "chat",
            "discord", "telegram", "announcement", "communication", "respond",
            "follow-up", "followup", "update", "status",
        ),
    ),
    (
        Category.DESIGN,
        (
            "design", "mockup", "prototype", "wireframe", "ui", "ux",
            "visual", "graphics", "creative", "artwork", "illustration",
            "sketch", "figma", "styling",
        ),
    ),
    (
        Category.MARKETING,
        (
            "marketing", "content", "social media", "blog", "post", "tweet",
            "campaign", "promotion", "seo", "analytics", "metrics", "copy",
            "editorial", "publish", "social",
        ),
    ),
    (
        Category.PROJECT_MANAGEMENT,
        (
            "project", "management", "tracking", "jira", "trello", "asana",
            "milestone", "deadline", "timeline", "schedule", "coordination",
            "organizing", "backlog", "sprint",
        ),
    ),
    (
        Category.CUSTOMER,
        (
            "customer", "support", "client", "user", "feedback", "help",
            "ticket", "issue", "service", "complaint", "resolution",
            "assistance", "troubleshoot",
        ),
    ),
    (
        Category.ADMINISTRATION,
        (
            "admin", "operation", "process", "procedure", "policy",
            "system", "setup", "configure", "maintenance", "infrastructure",
            "organize", "filing", "documentation",
        ),
    ),
    (
        Category.LEARNING,
        (
            "training", "learning", "course", "workshop", "education",
            "skill", "development", "growth", "mentor", "coaching",
            "onboarding", "tutorial",
        ),
    ),
)

# Only consulted when no primary rule matched.
FALLBACK_TERMS: tuple[tuple[str, Category], ...] = (
    ("team", Category.PROJECT_MANAGEMENT),
    ("review", Category.RESEARCH),
    ("presentation", Category.COMMUNICATION),
    ("report", Category.RESEARCH),
    ("discussion", Category.MEETINGS),
    ("brainstorm", Category.PLANNING),
    ("collaboration", Category.PROJECT_MANAGEMENT),
)

DEFAULT_CATEGORY = Category.MISCELLANEOUS
