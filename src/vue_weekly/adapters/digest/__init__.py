"""Context rendering for the newsletter prompt."""

from vue_weekly.adapters.digest.context_renderer import MarkdownContextRenderer, build_context

__all__ = ["MarkdownContextRenderer", "build_context"]
