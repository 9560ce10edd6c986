# bookmind/prompts.py — context digest and LLM prompt templates

from typing import List

from .models import Bookmark

DESCRIPTION_MAX_CHARS = 150


def build_context(bookmarks: List[Bookmark], limit: int) -> str:
    """One line per bookmark for the first `limit` bookmarks, in the given order."""
    lines = []
    for b in bookmarks[: max(limit, 0)]:
        line = f"Title: {b.title}"
        if b.excerpt:
            line += f" | Description: {b.excerpt[:DESCRIPTION_MAX_CHARS]}"
        if b.tags:
            line += f" | Tags: {', '.join(b.tags)}"
        line += f" | URL: {b.url}"
        lines.append(line)
    return "\n".join(lines)


SEARCH_SYSTEM = """You are an AI assistant helping to search through bookmarks. Given a user's query and their bookmark collection, identify the most relevant bookmarks and explain why they match. Respond with:

1. A list of the most relevant bookmark titles (exactly as they appear in the context)
2. A brief explanation of why these bookmarks are relevant

Keep your response concise and focus on the most relevant matches."""

SEARCH_USER = """Query: {query}

Bookmark Collection:
{context_block}"""

SEARCH_MAX_TOKENS = 500
SEARCH_TEMPERATURE = 0.2


SUMMARY_SYSTEM = (
    "You are a helpful assistant that creates concise summaries of web pages. "
    "Provide a brief 2-3 sentence summary of the main content and key points."
)

SUMMARY_USER = "Please provide a concise summary of this webpage: {url}"

SUMMARY_MAX_TOKENS = 150
SUMMARY_TEMPERATURE = 0.3


TAGS_SYSTEM = (
    "You are a helpful assistant that suggests relevant tags for bookmarks. "
    "Based on the title, description, and URL provided, suggest 3-5 concise, relevant tags "
    "that would help categorize this bookmark. "
    "Return only the tags, separated by commas, without any additional text."
)

TAGS_USER = """Title: {title}
Description: {excerpt}
URL: {url}

Suggest relevant tags:"""

TAGS_MAX_TOKENS = 100
TAGS_TEMPERATURE = 0.3


SEARCH_HELP = [
    ("AI-Powered Bookmark Search",
     "Type your question or search query to find relevant bookmarks using AI"),
    ('Example: "Find articles about machine learning"',
     "AI will search your bookmarks and provide intelligent results"),
]

MISSING_KEY_HINT = "Configure your Perplexity API key (PERPLEXITY_API_KEY) to enable AI search."
DISABLED_HINT = "AI features are turned off (AI_ENABLED=0)."
NO_BOOKMARKS_HINT = "No bookmarks found. Your bookmark store appears to be empty."
NO_MATCHES_HINT = "No AI matches found. Try rephrasing your query or use regular search."
