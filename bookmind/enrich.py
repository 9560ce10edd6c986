# bookmind/enrich.py — one-shot summary and tag suggestions
from typing import List

from . import prompts as P
from .llm_client import CompletionClient


def summarize(client: CompletionClient, url: str) -> str:
    text = client.complete(
        P.SUMMARY_SYSTEM,
        P.SUMMARY_USER.format(url=url),
        max_tokens=P.SUMMARY_MAX_TOKENS,
        temperature=P.SUMMARY_TEMPERATURE,
    )
    return text.strip()


def parse_tags(text: str) -> List[str]:
    """Comma-separated reply to a tag list; drops empty and one-character segments."""
    tags = []
    for part in text.strip().split(","):
        tag = part.strip()
        if len(tag) > 1:
            tags.append(tag)
    return tags


def suggest_tags(client: CompletionClient, title: str, excerpt: str, url: str) -> List[str]:
    text = client.complete(
        P.TAGS_SYSTEM,
        P.TAGS_USER.format(title=title, excerpt=excerpt or "", url=url),
        max_tokens=P.TAGS_MAX_TOKENS,
        temperature=P.TAGS_TEMPERATURE,
    )
    return parse_tags(text)
