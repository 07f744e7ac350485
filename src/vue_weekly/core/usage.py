"""Token cost estimation."""

from dataclasses import dataclass

from vue_weekly.core.entities import UsageMetrics

# USD per million tokens (Claude Haiku 4.5)
INPUT_PRICE = 1.0
OUTPUT_PRICE = 5.0
CACHE_WRITE_PRICE = 1.25
CACHE_READ_PRICE = 0.10


@dataclass
class TokenCost:
    """Estimated cost of a generate() call, in USD."""

    input_cost: float
    output_cost: float
    cache_cost: float
    cache_read_cost: float

    @property
    def total_cost(self) -> float:
        return self.input_cost + self.output_cost + self.cache_cost + self.cache_read_cost


def calculate_token_cost(usage: UsageMetrics) -> TokenCost:
    """Estimate cost for the given usage."""
    return TokenCost(
        input_cost=usage.input_tokens / 1_000_000 * INPUT_PRICE,
        output_cost=usage.output_tokens / 1_000_000 * OUTPUT_PRICE,
        cache_cost=(usage.cache_creation_input_tokens or 0) / 1_000_000 * CACHE_WRITE_PRICE,
        cache_read_cost=(usage.cache_read_input_tokens or 0) / 1_000_000 * CACHE_READ_PRICE,
    )
