"""
Per-profile wording tables used by the content synthesizers

Each table maps a profile type to fixed text; adding a profile means adding
one entry per table.
"""
from types import MappingProxyType

# Noun phrase describing the session in the summary sentence
SESSION_PHRASES = MappingProxyType({
    "student": "learning session",
    "developer": "development workflow",
    "support": "support case investigation",
    "researcher": "research exploration",
    "custom": "work session",
})

# Prefix of the generated title
PROFILE_LABELS = MappingProxyType({
    "student": "Study Session",
    "developer": "Dev Session",
    "support": "Support Case",
    "researcher": "Research Notes",
    "custom": "Session Notes",
})

# Appended after the takeaways extracted from event text
CANNED_TAKEAWAYS = MappingProxyType({
    "student": (
        "Review the core concepts covered in this session",
        "Summarize new material in your own words",
        "Note open questions to bring to the next class",
    ),
    "developer": (
        "Capture the reasoning behind implementation decisions",
        "Document solutions found for future reference",
        "Keep related code changes in small, reviewable commits",
    ),
    "support": (
        "Record the root cause and the resolution steps",
        "Share the fix with the team knowledge base",
    ),
    "researcher": (
        "Cross-check key findings against primary sources",
        "Record citations for every source consulted",
        "Separate evidence from interpretation in your notes",
    ),
    "custom": (
        "Review captured activities for key points",
        "Document outcomes for future reference",
    ),
})

# Only the first two entries of each list are used
CANNED_ACTIONS = MappingProxyType({
    "student": (
        "Create flashcards for the key terms",
        "Schedule a review session for this material",
        "Complete the practice exercises",
    ),
    "developer": (
        "Write tests for the new functionality",
        "Open a pull request for review",
        "Update the changelog",
    ),
    "support": (
        "Update the ticket with the resolution details",
        "Follow up with the customer to confirm the fix",
        "Add the issue to the known-problems list",
    ),
    "researcher": (
        "Organize sources into a reference library",
        "Draft a summary of the findings",
        "Identify gaps for further research",
    ),
    "custom": (
        "Identify follow-up tasks",
        "Schedule the next session",
        "Share the recap with collaborators",
    ),
})

CANNED_ACTIONS_USED = 2

DOCUMENT_CODE_ACTION = "Document the code changes made during this session"
CONSOLIDATE_FINDINGS_ACTION = "Review and consolidate key findings"

GITHUB_INSIGHT = "Active on GitHub: code review and version control were part of this workflow"

# (trigger keywords, suggestion) checked in order against the top keywords
RELATED_TOPIC_TRIGGERS = (
    (("react", "component"), "React component patterns and best practices"),
    (("api", "fetch"), "API design and data fetching strategies"),
    (("test", "testing"), "Testing strategies and test automation"),
    (("data", "analysis"), "Data analysis and visualization techniques"),
    (("learn", "study"), "Effective learning and study techniques"),
)

GENERIC_RELATED_TOPICS = (
    "Productivity and workflow optimization",
    "Knowledge management and note-taking",
)

# Zero-state bundle for sessions without events
EMPTY_SESSION_TITLE = "Empty Session"
EMPTY_SESSION_SUMMARY = "No events were captured in this session."
EMPTY_SESSION_ACTION = "Start capturing activity to generate content"
