"""Example task log and format help shown to users."""

DEMO_LINES = (
    "[1 hour] Weekly team sync meeting",
    "[30 mins] Code review",
    "[45 mins] Customer support call",
    "[2 hours] UI design workshop",
    "[1.5 hrs] Marketing campaign planning",
    "[30 mins] Infrastructure maintenance",
    "[1 hour] Learning React hooks",
    "[45 mins] Email follow-ups",
)

DEMO_LOG = "\n".join(DEMO_LINES)

SUPPORTED_FORMATS = (
    "Hours: [X hour], [X hours], [X hr], [X hrs], [X h]",
    "Minutes: [X minute], [X minutes], [X min], [X mins], [X m]",
    "Decimal hours work too: [1.5 hours], [0.5 h]",
)
