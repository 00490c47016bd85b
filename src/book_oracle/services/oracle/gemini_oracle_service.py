"""Gemini Oracle Service - Answers life questions through books via Google Gemini API."""

import logging
from typing import Optional

import google.genai as genai
from google.genai import types
from pydantic import ValidationError

from book_oracle.core import FailureCause, OracleResponse, OracleResult, Query
from book_oracle.services.oracle.oracle_service import OracleService
from book_oracle.services.settings_manager import DEFAULT_MODEL_NAME, DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class GeminiOracleService(OracleService):
    """
    Oracle service using Google Gemini API.

    Sends one schema-constrained request per consultation, with no retries.
    A lower temperature favors a relevant book over a creative one.
    """

    MODEL_NAME = DEFAULT_MODEL_NAME
    TEMPERATURE = 0.5

    SYSTEM_INSTRUCTION = """Role: "Book Oracle" - Life Q&A Through Books

You are Book Oracle. You answer life questions *only* through specific books that deeply mirror the user's situation.
You are not a guru but a friend reading alongside the user.
**Deep relevance is key**: never pick a generic book. Pick one where a character's specific emotional struggle mirrors the user's.

Language Rules:
- If the language mode is 'zh' (Chinese), write the empathy, summary, analysis and tinyStep in Chinese.
- **ALWAYS** keep the BOOK TITLE, AUTHOR and QUOTE in English, even in Chinese mode.
- If the language mode is 'en' (English), answer fully in English.

Structure & Length (STRICT):
1. **Empathy**: exactly 1 standalone sentence. A "warm hug".
2. **Book Context (Page 1)**:
   - Choose ONE main book.
   - **4-5 short sentences MAX.**
   - Focus: a specific scene -> the character's feeling/struggle.
   - **CRITICAL**: briefly explain how they dealt with it and the cost/result (what they paid or gained).
3. **Reflection (Page 2)**:
   - **Quote**: 1 short, powerful sentence from the book (English).
   - **Analysis**: **2-3 short sentences MAX.** (Context -> Connection -> Meaning).
4. **Tiny Step (The Gift)**: a short, beautiful parting sentence under 20 words. A gift of words to carry with them. Warm, poetic, comforting. NOT a to-do list item.

Book Sources: famous English-language works (Classics, Philosophy, Biography).
Tone: calm, minimal, poignant.

Safety: if the user indicates severe distress or self-harm, kindly suggest seeking professional help in the empathy sentence.

Output valid JSON only, matching the response schema.

Current language mode: '{language}'.
"""

    RESPONSE_SCHEMA = types.Schema(
        type=types.Type.OBJECT,
        properties={
            "empathy": types.Schema(
                type=types.Type.STRING,
                description="Brief empathy (1 sentence). A 'warm hug' acknowledging their struggle. Standalone and comforting.",
            ),
            "bookContext": types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "title": types.Schema(type=types.Type.STRING, description="Title of the book (Always in English)"),
                    "author": types.Schema(type=types.Type.STRING, description="Author of the book (Always in English)"),
                    "summary": types.Schema(
                        type=types.Type.STRING,
                        description="Page 1 content: 4-5 short sentences MAX. Specific scene/struggle + how they acted/cost/result.",
                    ),
                },
                required=["title", "author", "summary"],
            ),
            "reflection": types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "quote": types.Schema(
                        type=types.Type.STRING,
                        description="Page 2 quote: 1 short 'golden sentence' from the book (Always in English).",
                    ),
                    "analysis": types.Schema(
                        type=types.Type.STRING,
                        description="Page 2 reflection: 2-3 very concise sentences. 1 on quote context, 1-2 on meaning for the user.",
                    ),
                },
                required=["quote", "analysis"],
            ),
            "tinyStep": types.Schema(
                type=types.Type.STRING,
                description="A short, beautiful parting sentence. Not a task. Warm and poetic (1 sentence, < 20 words).",
            ),
        },
        required=["empathy", "bookContext", "reflection", "tinyStep"],
    )

    def __init__(
        self,
        model_name: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.model_name = model_name or self.MODEL_NAME
        self.timeout_seconds = timeout_seconds

    def build_config(self, query: Query) -> types.GenerateContentConfig:
        """Request configuration for a single consultation."""
        return types.GenerateContentConfig(
            system_instruction=self.SYSTEM_INSTRUCTION.format(language=query.language.value),
            response_mime_type="application/json",
            response_schema=self.RESPONSE_SCHEMA,
            temperature=self.TEMPERATURE,
        )

    def consult(self, query: Query, api_key: Optional[str]) -> OracleResult:
        """Ask Gemini for a book that answers the query."""
        if not api_key or not api_key.strip():
            logger.warning("Oracle request skipped: no API key configured")
            return self._failure(FailureCause.MISSING_CREDENTIAL, "API key not configured")

        logger.debug(
            "Oracle request: model=%s language=%s query_chars=%d",
            self.model_name,
            query.language.value,
            len(query.text),
        )

        try:
            client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout_seconds * 1000)),
            )
            response = client.models.generate_content(
                model=self.model_name,
                contents=query.text,
                config=self.build_config(query),
            )
            text = response.text
        except Exception as exc:
            logger.warning("Oracle request failed (%s): %s", type(exc).__name__, exc)
            return self._failure(FailureCause.TRANSPORT, f"Request failed: {exc}")

        if not text or not text.strip():
            logger.warning("Oracle returned an empty response")
            return self._failure(FailureCause.EMPTY_RESPONSE, "Empty response from API")

        try:
            oracle_response = OracleResponse.from_json(text)
        except ValidationError as exc:
            logger.warning("Oracle response rejected: %d validation error(s)", exc.error_count())
            logger.debug("Rejected payload: %s", text)
            return self._failure(FailureCause.INVALID_RESPONSE, "Response did not match the expected schema")

        logger.info("Oracle answered with %r", oracle_response.book_context.title)
        return OracleResult.success(oracle_response, model=self.model_name)

    def _failure(self, cause: FailureCause, error: str) -> OracleResult:
        return OracleResult.failure(cause, error, model=self.model_name)
