"""
Shared constants and run configuration for the advisor.

Everything tunable about a recommendation lives in `AdvisorConfig`; the CLIs
build one from their argparse flags and pass it down explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

# Single source of truth for word length and Wordle turn budget.
WORD_SIZE = 5
WORDLE_MAX_TURNS = 6

# Page listing every past Wordle answer (scraped for the exclusion set).
USED_WORDS_URL = "https://www.rockpapershotgun.com/wordle-past-answers"


@dataclass(frozen=True)
class PickPolicy:
    """Knobs for the rank/entropy trade-off in the final pick."""
    large_set_threshold: int = 25        # N above this: entropy-led regime
    entropy_rank_threshold: float = 0.50  # bits; gap at or below this favors rank
    epsilon: float = 1e-9                 # float equality window for entropy sorts


@dataclass
class AdvisorConfig:
    large_set_threshold: int = 25
    entropy_rank_threshold: float = 0.50
    epsilon: float = 1e-9
    top_picks: int = 40          # rows shown in the recommendation table
    workers: int = 1             # >1 enables a process pool for the entropy pass
    progress: bool = False       # tqdm bar over the entropy pass

    def policy(self) -> PickPolicy:
        return PickPolicy(
            large_set_threshold=self.large_set_threshold,
            entropy_rank_threshold=self.entropy_rank_threshold,
            epsilon=self.epsilon,
        )
