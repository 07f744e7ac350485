"""Markdown context renderer for the newsletter prompt."""

from datetime import date, datetime, timezone

from vue_weekly.core import ContentCategory, Item

# Fixed English names keep output independent of the process locale
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

SECTION_ORDER = (
    ContentCategory.NEWS,
    ContentCategory.REPOS,
    ContentCategory.DISCUSSIONS,
    ContentCategory.ARTICLES,
)

SECTION_HEADINGS = {
    ContentCategory.NEWS: "Recent Vue.js Projects:",
    ContentCategory.REPOS: "Trending Vue.js Repositories:",
    ContentCategory.DISCUSSIONS: "Community Discussions:",
    ContentCategory.ARTICLES: "Articles & Tutorials:",
}

FALLBACKS = {
    ContentCategory.NEWS: "- No recent Vue.js news available",
    ContentCategory.REPOS: "- No trending repositories available",
    ContentCategory.DISCUSSIONS: "- No significant community discussions this week",
    ContentCategory.ARTICLES: "- No recent articles available",
}


def format_long_date(value: date) -> str:
    """Format as ``October 18, 2026``."""
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"


def format_short_date(value: datetime) -> str:
    """Format as ``Oct 18``, in UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{MONTHS[value.month - 1][:3]} {value.day}"


class MarkdownContextRenderer:
    """Render ranked items into the text block handed to the LLM."""

    def render_sections(self, ranked: dict[ContentCategory, list[Item]]) -> dict[ContentCategory, str]:
        """Render one markdown block per category, with fallbacks for empty ones."""
        formatters = {
            ContentCategory.NEWS: self._format_news,
            ContentCategory.REPOS: self._format_repo,
            ContentCategory.DISCUSSIONS: self._format_discussion,
            ContentCategory.ARTICLES: self._format_article,
        }

        sections = {}
        for category in SECTION_ORDER:
            items = ranked.get(category, [])
            lines = [formatters[category](item, index) for index, item in enumerate(items, 1)]
            sections[category] = "\n".join(lines) or FALLBACKS[category]

        return sections

    def render(self, ranked: dict[ContentCategory, list[Item]], current_date: date) -> str:
        """Assemble the full context string."""
        sections = self.render_sections(ranked)

        blocks = [f"Current Date: {format_long_date(current_date)}"]
        for category in SECTION_ORDER:
            blocks.append(f"{SECTION_HEADINGS[category]}\n{sections[category]}")

        return "\n\n".join(blocks)

    def _format_news(self, item: Item, index: int) -> str:
        return f"- [{item.title}]({item.url})"

    def _format_repo(self, item: Item, index: int) -> str:
        line = f"{index}. **[{item.title}]({item.url})** - {item.description or 'No description'}"
        if item.stars:
            line += f" (⭐ {item.stars:,})"
        return line

    def _format_discussion(self, item: Item, index: int) -> str:
        line = f"{index}. **[{item.title}]({item.url})** - {item.source}"
        if item.date:
            line += f" ({format_short_date(item.date)})"
        return line

    def _format_article(self, item: Item, index: int) -> str:
        line = f"{index}. **[{item.title}]({item.url})** - {item.source}"
        if item.date:
            line += f" ({format_short_date(item.date)})"

        stats = []
        if item.score:
            stats.append(f"❤️ {item.score}")
        if item.comments:
            stats.append(f"💬 {item.comments}")
        if stats:
            line += f" | {', '.join(stats)}"

        if item.description:
            line += f"\n   {item.description}"
        return line


def build_context(ranked: dict[ContentCategory, list[Item]], current_date: date) -> str:
    """Render ranked items with a date stamp into a single context string."""
    return MarkdownContextRenderer().render(ranked, current_date)
