"""Plantillas de prompt por estilo de reescritura."""

from __future__ import annotations

from typing import Dict, List

DEFAULT_STYLE = "natural"

STYLES: Dict[str, str] = {
    "natural": "Natural Language & Flow",
    "emotional": "Emotional Connection",
    "conversational": "Conversational Elements",
    "personal": "Personal Touch",
    "active": "Active Engagement",
    "transitions": "Natural Transitions",
    "cultural": "Cultural Adaptability",
    "technical": "Technical Balance",
}

STYLE_INSTRUCTIONS: Dict[str, str] = {
    "natural": "Rewrite this like you're having a friendly conversation with someone you know well.",
    "emotional": (
        "Add warmth to this response while maintaining its professionalism. "
        "Rephrase with more empathy and understanding."
    ),
    "conversational": (
        "Use more contractions and everyday language in this response. "
        "Break down complex ideas like you're explaining them to a friend."
    ),
    "personal": (
        "Include more 'you' and 'we' to make this more personal. "
        "Add relevant examples that people can relate to."
    ),
    "active": (
        "Use active voice and make this more direct. "
        "Write this like you're enthusiastically sharing helpful information."
    ),
    "transitions": (
        "Smooth out the transitions to sound more natural and flowing. "
        "Connect these ideas like you would in everyday conversation."
    ),
    "cultural": (
        "Adjust this to sound more culturally relatable. "
        "Use everyday expressions that people commonly use."
    ),
    "technical": (
        "Simplify this technical information while keeping it accurate. "
        "Explain this like an expert having a casual conversation."
    ),
}

WRITING_GUIDE = """
# Enhanced Writing Style Prompt Template

This template is designed to help you generate clear, concise, and natural-sounding text for a broad audience. Follow these guidelines strictly to ensure effective communication and high-quality results. Use this as a checklist before submitting your final response.

---

## I. Prompt Specifications

- **Target Audience:**
  General public, aiming for clear communication accessible to most readers.

- **Desired Tone:**
  Natural, conversational, and authentic.

- **Content Overview:**
  Rewriting the provided text to sound more human and less AI-generated.

- **Word Count:**
  Similar to the original text length.

---

## II. Style Guidelines & Constraints

### A. Clarity and Conciseness

1. **Sentence Structure:**
   - Vary sentence length for a natural rhythm.
   - Avoid sentences over 25 words unless necessary.
   - Use clear subject-verb-object structure.

2. **Word Choice:**
   - Use precise, everyday language.
   - Define technical terms or jargon.
   - Favor active voice (90% or more).

3. **Direct Address:**
   - Use "you" and "your" for engagement, but avoid overuse.

4. **Conciseness:**
   - Every word should add meaning.
   - Remove redundancy and unnecessary qualifiers.

### B. Tone and Style

1. **Natural Conversational Tone:**
   - Write as you would speak, but maintain grammar.
   - Starting sentences with conjunctions is fine for flow, but don't overdo it.

2. **Honesty and Authenticity:**
   - Be straightforward and unbiased.
   - Avoid exaggeration or unsubstantiated claims.

3. **Active Voice:**
   - Use active voice consistently.
   - Use passive voice only when necessary or stylistically appropriate.

4. **Avoid Marketing Clichés:**
   - Do not use phrases like: "game-changing," "revolutionary," "cutting-edge," "synergy," "paradigm shift."

### C. Grammar and Mechanics

1. **Grammar:**
   - Use correct grammar.
   - Minor imperfections are okay if they help flow, but aim for accuracy.

2. **Capitalization and Punctuation:**
   - Follow standard English conventions.
   - Use punctuation correctly and sparingly.
   - Avoid excessive semicolons and em dashes.
   - No emojis, hashtags, or asterisks unless requested.

3. **Formatting:**
   - Unless specified, write as a single, coherent paragraph.
   - Use bullet points or numbered lists only if requested.

---

## III. Prohibited Elements

Do not include these unless explicitly requested and justified:

- **Filler Phrases:**
  e.g., "It goes without saying," "Needless to say," "In order to," "At the end of the day."

- **Clichés and Jargon:**
  Avoid overused expressions and unnecessary technical terms.

- **Unnecessary Conditional Language:**
  Use definitive language. Avoid "could," "might," "may" unless uncertainty is essential.

- **Redundancy and Repetition:**
  Do not repeat words or ideas unnecessarily.

- **Forced Keyword Placement:**
  Do not insert keywords if they disrupt natural flow.

---

Here is the text to rewrite:
"""


def build_base_prompt(text: str) -> str:
    # El texto del usuario va literal, sin formateo.
    return f'{WRITING_GUIDE}\n"""\n{text}\n"""\n'


def build_prompt(style: str, text: str) -> str:
    """
    Devuelve la plantilla base con el texto y, si el estilo es conocido,
    la instrucción adicional de ese estilo. Estilos desconocidos usan
    solo la plantilla base.
    """

    base = build_base_prompt(text)
    instruction = STYLE_INSTRUCTIONS.get(style)
    if instruction is None:
        return base
    return f"{base}\n\nAdditional instruction: {instruction}"


def list_styles() -> List[Dict[str, str]]:
    return [{"value": key, "label": label} for key, label in STYLES.items()]
