"""System instruction for LLM commit message generation.

The base instruction is configurable; the suffixes are appended depending
on whether the model writes the whole message or only its type and scope.
"""

SYSTEM_MESSAGE = """Generate a conventional commit message that follows the Conventional Commits specification as described below.
A scope may be provided to a commit’s type, to provide additional contextual information and is contained within parenthesis, e.g., feat(parser): add ability to parse arrays.
Base yourself on the adjusted files in the diff and the actual code changes to determine what the type and scope of the message should be.
Don't include a message body, just the commit title. Don't surround it in backticks or anything of custom markdown formatting."""

EXAMPLES_HEADER = "Example of the types with the description when they should be used:\n"

FULL_SUFFIX = (
    "You will be given a diff of the changes made to the codebase. "
    "You will need to generate a full commit message that includes the type, "
    "optional scope, and description of the changes."
)

SHORT_SUFFIX = (
    "It is your job to come up with only the type and optional scope based on "
    "the provided commit message and staged changes (diff) and then reply with "
    "the full commit message. Don't touch the original provided commit message, "
    "just include it and don't add stuff to it."
)
