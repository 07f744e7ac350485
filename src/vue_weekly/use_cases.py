"""Business logic use cases."""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from vue_weekly.adapters.digest import MarkdownContextRenderer
from vue_weekly.adapters.sources import ResourceRegistry
from vue_weekly.config import Settings, get_settings
from vue_weekly.core import (
    AggregateCollectionError,
    CollectedResult,
    GenerateOptions,
    LLMClient,
    LLMMessage,
    UsageMetrics,
)
from vue_weekly.core.prompts import CONTEXT_PLACEHOLDER, interpolate_prompt
from vue_weekly.core.ranking import group_by_category, rank_sections
from vue_weekly.core.usage import TokenCost, calculate_token_cost
from vue_weekly.logging import get_logger

logger = get_logger(__name__)


@dataclass
class NewsletterResult:
    """Generated newsletter with what it took to produce it."""

    text: str
    usage: UsageMetrics
    context: str
    collected: CollectedResult

    @property
    def cost(self) -> TokenCost:
        return calculate_token_cost(self.usage)


class NewsletterPipeline:
    """Collect sources, rank them and have an LLM write the newsletter.

    Every call to generate() builds a fresh registry, so separate runs share
    no state.
    """

    def __init__(
        self,
        settings: Settings,
        registry_factory: Optional[Callable[[], ResourceRegistry]] = None,
        renderer: Optional[MarkdownContextRenderer] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.settings = settings
        self.registry_factory = registry_factory or self._default_registry
        self.renderer = renderer or MarkdownContextRenderer()
        self.today = today or date.today

    def _default_registry(self) -> ResourceRegistry:
        return ResourceRegistry(
            timeout=self.settings.pipeline.http_timeout,
            github_token=self.settings.github_token,
        )

    async def collect(self) -> CollectedResult:
        """Register every configured source and collect them."""
        registry = self.registry_factory()
        for source in self.settings.sources:
            registry.register(source)

        collected = await registry.collect()
        self._check_collection(collected)
        return collected

    def _check_collection(self, collected: CollectedResult) -> None:
        """Escalate collection failures according to the configured policy."""
        if not collected.has_errors:
            return

        if self.settings.pipeline.fail_on_source_error:
            raise AggregateCollectionError(collected.errors)

        if len(collected.errors) == len(collected.resources):
            # Nothing left to write about
            raise AggregateCollectionError(collected.errors)

        logger.warning(
            "collection_degraded",
            failed=collected.failed_ids,
            succeeded=len(collected.resources) - len(collected.errors),
        )

    def build_context(self, collected: CollectedResult) -> str:
        """Group, rank and render collected items."""
        ranked = rank_sections(
            group_by_category(collected),
            article_limit=self.settings.pipeline.article_limit,
            discussion_limit=self.settings.pipeline.discussion_limit,
        )
        return self.renderer.render(ranked, self.today())

    async def generate(self, llm_client: LLMClient) -> NewsletterResult:
        """Run the whole pipeline once."""
        collected = await self.collect()
        context = self.build_context(collected)

        prompts = self.settings.prompts
        messages = [
            LLMMessage(role="system", content=prompts.system.strip(), cache=True),
            LLMMessage(
                role="user",
                content=interpolate_prompt(prompts.user, {CONTEXT_PLACEHOLDER: context}),
            ),
        ]

        logger.info(
            "newsletter_generation_started",
            provider=llm_client.name,
            model=llm_client.model,
            context_chars=len(context),
        )
        response = await llm_client.generate(
            messages, GenerateOptions(temperature=self.settings.llm.temperature)
        )

        result = NewsletterResult(
            text=response.text,
            usage=response.usage,
            context=context,
            collected=collected,
        )
        logger.info(
            "newsletter_generated",
            provider=llm_client.name,
            model=llm_client.model,
            estimated_cost_usd=round(result.cost.total_cost, 6),
            **response.usage.to_dict(),
        )
        return result


async def generate_newsletter(
    llm_client: LLMClient, settings: Optional[Settings] = None
) -> NewsletterResult:
    """Generate a newsletter with the given LLM backend.

    Settings are loaded from ``config.yaml`` and the environment when not
    supplied.
    """
    if settings is None:
        settings = get_settings()
    return await NewsletterPipeline(settings).generate(llm_client)
