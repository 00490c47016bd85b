"""Localized UI copy and sample questions for each language mode."""

from dataclasses import dataclass
from typing import Dict, Tuple

from book_oracle.core import LanguageMode


@dataclass(frozen=True)
class UiCopy:
    headline: str
    headline_accent: str
    placeholder: str
    privacy_note: str
    submit: str
    samples_heading: str
    ask_another: str
    consulting: str
    page1: str
    page2: str
    gift: str
    perspective_note: str
    library_silent: str


DISCLAIMER = (
    "AI may produce inaccurate information. It is not a substitute for professional medical, "
    "legal, or psychological advice. If you are in distress or danger, please contact local "
    "emergency services or a professional immediately."
)

UI_COPY: Dict[LanguageMode, UiCopy] = {
    LanguageMode.EN: UiCopy(
        headline="Life has questions.",
        headline_accent="Books have voices.",
        placeholder="What are you struggling with right now?",
        privacy_note="Private & Anonymous",
        submit="Open the Book",
        samples_heading="OR TRY ONE OF THESE",
        ask_another="Ask Another Question",
        consulting="Consulting the library...",
        page1="PAGE 1 • THE STORY",
        page2="PAGE 2 • REFLECTION",
        gift="A GIFT FOR YOU",
        perspective_note="This is just one perspective from the book, not the only answer.",
        library_silent="The library is currently silent. Please try asking again in a moment.",
    ),
    LanguageMode.ZH: UiCopy(
        headline="生活常有困惑，",
        headline_accent="书籍自有回响。",
        placeholder="你现在正为什么而困扰？",
        privacy_note="隐私且匿名",
        submit="翻开书页",
        samples_heading="或者试着问问",
        ask_another="问另一个问题",
        consulting="正在查阅图书馆...",
        page1="PAGE 1 • THE STORY / 故事",
        page2="PAGE 2 • REFLECTION / 回响",
        gift="A GIFT FOR YOU / 送你一句话",
        perspective_note="这只是书里的一种选择，并非唯一的答案。",
        library_silent="图书馆暂时沉默了，请稍后再试。",
    ),
}

SAMPLE_QUESTIONS: Dict[LanguageMode, Tuple[str, ...]] = {
    LanguageMode.EN: (
        "I feel like I'm falling behind my peers.",
        "I'm afraid to make the wrong choice.",
        "How do I deal with a broken heart?",
        "I've lost my motivation to work.",
    ),
    LanguageMode.ZH: (
        "感觉同龄人都比我成功，很焦虑。",
        "虽然不快乐，但不敢跳出舒适圈。",
        "如何面对一段关系的结束？",
        "最近对什么都提不起兴趣。",
    ),
}


def copy_for(language: LanguageMode) -> UiCopy:
    return UI_COPY[language]


def samples_for(language: LanguageMode) -> Tuple[str, ...]:
    return SAMPLE_QUESTIONS[language]
