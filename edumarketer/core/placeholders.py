"""
Human-readable stand-ins written into result fields when the model output
could not be validated. The surrounding call still succeeds.
"""


def error_placeholder(action: str, subject: str) -> str:
    return f"Error: Could not {action} {subject}."


def refine_placeholder(subject: str) -> str:
    return f"Error: Could not refine {subject}. Original preserved."


PERFORMANCE_MARKETING_GENERATE_ERROR = (
    "# Error\n\n"
    + error_placeholder("generate", "performance marketing strategy")
    + " Please ensure all input fields are detailed and try again."
)

EXPAND_CONTENT_IDEA_ERROR = (
    error_placeholder("expand", "the content idea")
    + " Please try again. Consider rephrasing the original idea or providing more"
    " context if this issue persists."
)
