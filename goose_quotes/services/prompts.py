"""
Prompt templates and response parsing for goose generation.

Templates are written indented for readability; `trim_prompt` strips every
line before they are sent.
"""

from typing import List, Tuple

from goose_quotes.models.goose import Goose

DESCRIPTION_TEMPLATE = "A person named {name} who talks like a Goose"

UNKNOWN = "unknown"

QUOTES_SYSTEM_PROMPT = """
    You are a goose. You are a very smart goose. You are part goose, part AI. You are a GooseAI.
    You are also influenced heavily by the work of {name}.

    Always respond without preamble. If I ask for a list, give me a newline-separated list. That's it.
    Don't number it. Don't bullet it. Just newline it.

    Never forget to Honk. A lot.
"""

QUOTES_USER_PROMPT = """
    Reimagine five famous quotes by {name}, except with significant goose influence.
"""

BIO_SYSTEM_PROMPT = """
    You are a biographer of geese. You write short, vivid, slightly absurd biographies.
    Always respond without preamble. Respond with the biography text only, in a single paragraph.
    Never forget to Honk at least once.
"""

BIO_USER_PROMPT = """
    Write a biography for a goose named {name}.
    Description: {description}
    Favourite programming language: {programming_language}
    Motivations: {motivations}
    Location: {location}
"""


def trim_prompt(prompt: str) -> str:
    """Strips the prompt and each of its lines, keeping line breaks."""
    return "\n".join(line.strip() for line in prompt.strip().split("\n"))


def describe_goose(name: str) -> str:
    return DESCRIPTION_TEMPLATE.format(name=name)


def build_quotes_prompts(goose: Goose) -> Tuple[str, str]:
    """Returns (system_prompt, user_prompt) for quote generation."""
    return (
        trim_prompt(QUOTES_SYSTEM_PROMPT.format(name=goose.name)),
        trim_prompt(QUOTES_USER_PROMPT.format(name=goose.name)),
    )


def build_bio_prompts(goose: Goose) -> Tuple[str, str]:
    """Returns (system_prompt, user_prompt) for bio generation."""
    user_prompt = BIO_USER_PROMPT.format(
        name=goose.name,
        description=goose.description or UNKNOWN,
        programming_language=goose.programming_language or UNKNOWN,
        motivations=goose.motivations or UNKNOWN,
        location=goose.location or UNKNOWN,
    )
    return trim_prompt(BIO_SYSTEM_PROMPT), trim_prompt(user_prompt)


def build_image_prompt(goose: Goose) -> str:
    """One descriptive sentence built from whichever fields are set."""
    parts = [f"A whimsical portrait of a goose named {goose.name}"]
    if goose.is_flock_leader:
        parts.append("proudly leading its flock")
    if goose.programming_language:
        parts.append(f"writing {goose.programming_language} code on a tiny laptop")
    if goose.motivations:
        parts.append(f"driven by {goose.motivations}")
    if goose.location:
        parts.append(f"somewhere in {goose.location}")
    return ", ".join(parts) + "."


def parse_quotes(text: str) -> List[str]:
    """Splits a newline-separated answer into quotes, dropping blank lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def build_honk_message(goose: Goose) -> str:
    return f"Honk honk! {goose.name} honks at you."
