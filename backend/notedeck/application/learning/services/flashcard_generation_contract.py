"""
Contract between notedeck and the generative text service.

``build_prompt`` turns note text into a fixed instruction prompt and
``parse_and_validate`` admits the raw reply into the domain only after every
card passed an explicit allow-list of fields and types plus the size limits.
Both are pure functions; the service call itself lives in infrastructure.
"""

import json
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from notedeck.application.common.result import Failure, Result, Success
from notedeck.domain.learning.errors import GenerationError, GenerationErrorKind

MAX_GENERATED_CARDS = 25
MAX_FIELD_LENGTH = 2000

_PROMPT_TEMPLATE = """
You turn study notes into question/answer flashcards.
{scope}
Respond with valid JSON only: no commentary, no markdown fences, no extra text.

RULES:
1. Write concise question/answer cards covering the key facts, definitions, reasons, contrasts and ideas in the notes.
2. Write at most {max_cards} cards. Short notes get few cards; never pad the set with material that is not in the notes.
3. Every card must come strictly from the notes. Do not use outside knowledge and do not invent facts or sources.
4. If the notes are empty, return zero cards.
5. {unrelated_rule}
6. Each card has exactly three fields: "id" (integer, starting at 1), "question" (string) and "answer" (string).
7. The top-level JSON object has exactly one key: "cards" (array). Add no tags, titles, timestamps or other metadata.

Output format:
{{
    "cards": [
        {{"id": 1, "question": "<question text>", "answer": "<answer text>"}}
    ]
}}

Return ONLY the JSON object for the notes between the <notes> tags.

<notes>
{notes}
</notes>
"""


@dataclass(frozen=True)
class GeneratedCard:
    """Validated question/answer pair from the generation service."""

    question: str
    answer: str


class _CardPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int
    question: str
    answer: str


class _CardsPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    cards: list[_CardPayload]


def build_prompt(note_body: str, study_domain: str | None = None) -> str:
    """
    Build the generation prompt for a note.

    Args:
        note_body: Note text, embedded verbatim (may be empty)
        study_domain: Optional subject the cards must belong to

    Returns:
        Prompt text; identical inputs always produce identical prompts
    """
    if study_domain:
        scope = f"The notes are about {study_domain}."
        unrelated_rule = f"If the notes are not about {study_domain}, return zero cards."
    else:
        scope = "The notes can be about any subject a student studies."
        unrelated_rule = "If the notes are not study material, return zero cards."

    return _PROMPT_TEMPLATE.format(
        scope=scope,
        max_cards=MAX_GENERATED_CARDS,
        unrelated_rule=unrelated_rule,
        notes=note_body,
    ).strip()


def _first_json_object(raw_text: str) -> str | None:
    """
    Slice out the first balanced ``{...}`` block.

    Braces inside JSON string literals do not count towards the balance.
    """
    start = raw_text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(raw_text)):
        char = raw_text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return raw_text[start : index + 1]
    return None


def _fail(kind: GenerationErrorKind, message: str) -> Failure[GenerationError]:
    return Failure(GenerationError(kind, message))


def parse_and_validate(raw_text: str) -> Result[list[GeneratedCard], GenerationError]:
    """
    Parse a raw generation reply into flashcards.

    Checks run in a fixed order and the first failing check decides the error:
    JSON block, ``cards`` array, field types, card count, then per-card
    emptiness and length.

    Args:
        raw_text: Text returned by the generation service

    Returns:
        Success with the trimmed cards (model ids dropped), or Failure
    """
    block = _first_json_object(raw_text)
    if block is None:
        return _fail(GenerationErrorKind.PARSE_ERROR, "No JSON object found in response")

    try:
        document = json.loads(block)
    except json.JSONDecodeError as e:
        return _fail(GenerationErrorKind.PARSE_ERROR, f"Response is not valid JSON: {e.msg}")

    try:
        payload = _CardsPayload.model_validate(document)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "response"
        return _fail(
            GenerationErrorKind.SCHEMA_ERROR,
            f"Invalid card format at '{location}': {first['msg']}",
        )

    if len(payload.cards) > MAX_GENERATED_CARDS:
        return _fail(
            GenerationErrorKind.LIMIT_EXCEEDED,
            f"Too many cards generated ({len(payload.cards)}), limit is {MAX_GENERATED_CARDS}",
        )

    cards: list[GeneratedCard] = []
    for position, card in enumerate(payload.cards, start=1):
        question = card.question.strip()
        answer = card.answer.strip()
        if not question or not answer:
            return _fail(
                GenerationErrorKind.EMPTY_FIELD,
                f"Card {position}: question and answer must be non-empty",
            )
        if len(question) > MAX_FIELD_LENGTH or len(answer) > MAX_FIELD_LENGTH:
            return _fail(
                GenerationErrorKind.FIELD_TOO_LONG,
                f"Card {position}: question/answer exceed maximum length of {MAX_FIELD_LENGTH}",
            )
        cards.append(GeneratedCard(question=question, answer=answer))

    return Success(cards)
