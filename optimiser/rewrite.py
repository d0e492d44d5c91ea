"""LLM copy rewriting for a classified page.

``optimise_copy`` pulls contact details out of the page Markdown, moves them
into calls-to-action, and asks the configured chat model for a rewritten
page with YAML front-matter.  The model's reply is returned as-is.
"""

from __future__ import annotations

from typing import Any, Sequence
from urllib.parse import urlsplit

import yaml

from optimiser.classifier import PageType
from optimiser.config import settings
from optimiser.extract.blog import BlogPost
from optimiser.extract.facts import ContactFacts, extract_contact_facts, strip_contact_facts

CONTACT_FORM: dict[str, Any] = {
    "action": "/api/contact",
    "method": "POST",
    "submitText": "Send Message",
    "fields": [
        {"name": "name", "label": "Your Name", "type": "text", "required": True},
        {"name": "email", "label": "Email Address", "type": "email", "required": True},
        {"name": "phone", "label": "Phone Number", "type": "tel", "required": False},
        {"name": "message", "label": "Message", "type": "textarea", "required": True},
    ],
}


# ---------------------------------------------------------------------------
# LLM helper
# ---------------------------------------------------------------------------

def _get_llm() -> Any:
    """Return a configured LangChain chat model based on ``settings``."""
    if settings.llm_provider == "openai":
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(
            model=settings.openai_chat_model,
            temperature=0,
            max_tokens=settings.llm_max_tokens,
        )

    from langchain_ollama import ChatOllama

    return ChatOllama(
        model=settings.ollama_chat_model,
        temperature=0,
        num_predict=settings.llm_max_tokens,
    )


# ---------------------------------------------------------------------------
# Prompt pieces
# ---------------------------------------------------------------------------

def page_slug(url: str) -> str:
    """URL path without surrounding slashes; the site root is ``home``."""
    return urlsplit(url).path.strip("/") or "home"


def contact_ctas(facts: ContactFacts) -> list[dict[str, str]]:
    ctas = [{"text": "Email", "href": f"mailto:{email}"} for email in sorted(facts.emails)]
    ctas += [{"text": "Call", "href": f"tel:{phone}"} for phone in sorted(facts.phones)]
    return ctas


def _yaml_block(data: dict[str, Any]) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, width=1000).rstrip()


def build_front_matter_template(
    page_type: PageType,
    slug: str,
    facts: ContactFacts,
    posts: Sequence[BlogPost] | None = None,
) -> str:
    """Return the front-matter skeleton the model is asked to fill in."""
    fixed: dict[str, Any] = {"pageType": page_type.value, "slug": slug}
    lines = [
        _yaml_block(fixed),
        'metaTitle: "<best-fit title ≤ 60 chars>"',
        'description: "<1-sentence summary ≤ 155 chars>"',
    ]

    extra: dict[str, Any] = {}
    if facts.address:
        extra["address"] = facts.address
    extra["cta"] = contact_ctas(facts)
    if page_type is PageType.CONTACT:
        extra["form"] = CONTACT_FORM
    if posts:
        extra["posts"] = [post.to_dict() for post in posts]
    lines.append(_yaml_block(extra))

    lines.append("wordCount: <integer>")
    return "---\n" + "\n".join(lines) + "\n---"


def build_prompt(
    markdown: str,
    page_type: PageType,
    url: str,
    tone: str | None = None,
    posts: Sequence[BlogPost] | None = None,
) -> str:
    """Assemble the rewriting prompt for one page."""
    facts = extract_contact_facts(markdown)
    body = strip_contact_facts(markdown, facts)
    front_matter = build_front_matter_template(page_type, page_slug(url), facts, posts)
    tone_line = f"Write in a {tone} tone.\n\n" if tone else ""

    return (
        "You are an expert web copy editor. Please optimize the following "
        f"Markdown content for a {page_type.value} page:\n\n"
        f"{body}\n\n"
        "Focus ONLY on the text content. Ignore all images, image URLs, and alt text.\n\n"
        f"{tone_line}"
        "Specific requirements:\n"
        "1. Generate a 1-sentence description (≤ 155 chars, no quotes)\n"
        "2. Extract ALL calls-to-action (CTAs) from the text and move them to the front-matter\n"
        "   - This includes any text with phone numbers, email addresses, or links\n"
        "   - Remove ALL Markdown links from the body text\n"
        "   - Convert phone numbers to proper tel: links\n"
        "3. Ensure exactly one H1 (#) at the start (taken from <title> or first <h1>)\n"
        "4. Demote any extra H1s to H2 (##)\n"
        "5. Keep bullet lists in Markdown format\n"
        "6. Do NOT move lists into structured arrays\n"
        "7. Improve grammar, clarity, concision, engagement; keep facts accurate\n"
        "8. Remove redundancy:\n"
        "   - Eliminate repeated phrases or concepts\n"
        "   - Consolidate similar ideas into single, clear statements\n"
        "   - Ensure each section adds unique value\n"
        "   - Remove duplicate information across sections\n"
        "   - Keep only the strongest version of any repeated message\n\n"
        "Return ONLY valid Markdown prefixed with YAML front-matter. Keep the "
        "pageType, slug, address, cta, form and posts values exactly as given:\n\n"
        f"{front_matter}\n\n"
        "(The rest of the Markdown body follows, starting with the single H1. "
        "NO LINKS should remain in the body text.)"
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def optimise_copy(
    markdown: str,
    page_type: PageType,
    url: str,
    tone: str | None = None,
    posts: Sequence[BlogPost] | None = None,
) -> str:
    """Rewrite *markdown* for a page of *page_type* and return the model output.

    Args:
        markdown: Converted page text.  For blog pages pass the clean body
            and the segmented *posts*.
        page_type: Classified type of the page.
        url: Page URL, used for the ``slug`` field.
        tone: Optional tone instruction (e.g. ``"friendly"``).
        posts: Blog posts to carry into the front-matter verbatim.

    Returns:
        Front-matter-prefixed Markdown, stripped of surrounding whitespace.
        An empty reply yields an empty string.
    """
    prompt = build_prompt(markdown, page_type, url, tone=tone, posts=posts)
    response = _get_llm().invoke(prompt)
    content = response.content if hasattr(response, "content") else str(response)
    return (content or "").strip()
