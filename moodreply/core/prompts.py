"""
Centralized configuration for LLM Prompts.

This module contains the mood templates used to ask Gemini for reply
suggestions. Every template ends with the same numbered-lines instruction,
which is what the response parser relies on.
"""
from moodreply.models.enums import Mood


class MoodPrompts:
    """Prompt templates for reply suggestions, one per mood."""

    NUMBERED_LINES_INSTRUCTION = (
        "\n\nPlease provide exactly 4 different response options, "
        "each on a new line starting with a number (1., 2., 3., 4.)."
    )

    TEMPLATES = {
        Mood.GOOD: (
            'Generate 4 friendly and positive response suggestions for this message: "{message}". '
            "Make them warm, supportive, and encouraging."
        ),
        Mood.ANGRY: (
            'Generate 4 assertive but controlled response suggestions for this message: "{message}". '
            "Make them firm but not aggressive, expressing frustration constructively."
        ),
        Mood.SARCASTIC: (
            'Generate 4 witty and sarcastic response suggestions for this message: "{message}". '
            "Make them clever and humorous but not mean-spirited."
        ),
        Mood.ROMCOM: (
            'Generate 4 romantic and sweet response suggestions for this message: "{message}". '
            "Make them loving, affectionate, and relationship-focused."
        ),
        Mood.COOL: (
            'Generate 4 casual and laid-back response suggestions for this message: "{message}". '
            "Make them relaxed, confident, and effortlessly cool."
        ),
        Mood.RIZZ: (
            'Generate 4 charming and flirtatious response suggestions for this message: "{message}". '
            "Make them smooth, confident, and attractive."
        ),
        Mood.FORMAL: (
            'Generate 4 professional and formal response suggestions for this message: "{message}". '
            "Make them polite, respectful, and business-appropriate."
        ),
        Mood.RELATIONSHIP: (
            'Generate 4 relationship-focused response suggestions for this message: "{message}". '
            "Make them thoughtful, caring, and aimed at strengthening the relationship."
        ),
    }

    # (label, icon) for the mood picker
    LABELS = {
        Mood.GOOD: ("Good", "😊"),
        Mood.ANGRY: ("Angry", "😠"),
        Mood.SARCASTIC: ("Sarcastic", "😏"),
        Mood.ROMCOM: ("Romantic", "💕"),
        Mood.COOL: ("Cool", "😎"),
        Mood.RIZZ: ("Rizz", "🔥"),
        Mood.FORMAL: ("Formal", "👔"),
        Mood.RELATIONSHIP: ("Relationship Helper", "💝"),
    }


def build_prompt(mood: Mood | str, message: str) -> str:
    """
    Build the Gemini prompt for a message in the given mood.

    Args:
        mood: One of the Mood values. Anything else raises ValueError.
        message: The message to reply to, embedded verbatim.

    Returns:
        The prompt text, always ending with the numbered-lines instruction.
    """
    template = MoodPrompts.TEMPLATES[Mood(mood)]
    # replace() rather than format() so braces in the message are left alone
    return template.replace("{message}", message) + MoodPrompts.NUMBERED_LINES_INSTRUCTION
