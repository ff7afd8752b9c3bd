"""Module with thresholds and weights of the detection signals."""

import tomllib
from decimal import Decimal
from functools import cache
from pathlib import Path
from typing import Literal, Self

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, model_validator

from textprobe.configuration import config
from textprobe.data_models import FormalityBranch, Language, TextAnalysisResult

LLM_SIGNAL = "llm"
DEFAULT_TUNING_FILE = Path(__file__).parent.parent / "profiles.toml"


class SignalRule(BaseModel):
    """Threshold bands and weight mapping a feature to an AI-likelihood."""

    feature: str | None = None
    weight: float = Field(..., ge=0.0, le=1.0)
    direction: Literal["low", "high"] = "low"
    ai_threshold: float
    ai_base: float = 0.7
    ai_slope: float = 0.0
    human_threshold: float | None = None
    human_likelihood: float = Field(0.3, ge=0.0, le=1.0)
    neutral_likelihood: float = Field(0.5, ge=0.0, le=1.0)
    value_scale: float = 1.0
    value_digits: int = Field(2, ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def validate_feature_exists(self) -> Self:
        """Validate whether the feature is measured by the analyser."""
        if (
            self.feature is not None
            and self.feature not in TextAnalysisResult.model_fields
        ):
            raise ValueError(f"There is no such feature `{self.feature}` to analyse.")
        return self


BranchRules = dict[str, SignalRule]


class TuningTables(BaseModel):
    """Signal rules of every language and formality branch."""

    english: dict[FormalityBranch, BranchRules]
    greek: dict[FormalityBranch, BranchRules]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_branches(self) -> Self:
        """Validate branches, their `llm` signals and sums of weights."""
        required_branches: dict[Language, set[str]] = {
            "english": {"default"},
            "greek": {"formal", "informal"},
        }
        for language, branches in required_branches.items():
            table = getattr(self, language)
            missing = branches - set(table)
            if missing:
                raise ValueError(
                    f"Branches {sorted(missing)} are missing for `{language}`."
                )

            for branch, rules in table.items():
                if LLM_SIGNAL not in rules or rules[LLM_SIGNAL].feature is not None:
                    raise ValueError(
                        f"`{language}.{branch}` needs an `{LLM_SIGNAL}` signal "
                        "without a feature."
                    )
                for key, rule in rules.items():
                    if key != LLM_SIGNAL and rule.feature is None:
                        raise ValueError(
                            f"Signal `{language}.{branch}.{key}` has no feature."
                        )

                total = sum(Decimal(str(rule.weight)) for rule in rules.values())
                if total > 1:
                    raise ValueError(
                        f"Weights of `{language}.{branch}` signals have to sum up "
                        f"to at most 1.0 but they sum up to {total}."
                    )
        return self

    def get_rules(self, language: Language, branch: FormalityBranch) -> BranchRules:
        """
        Get rules of signals for a language and its formality branch.

        Args:
            language (Language): Language of the text.
            branch (FormalityBranch): Formality branch selected for the text.

        Raises:
            ValueError: Raised if there are no rules for such a combination.

        Returns:
            BranchRules: Ordered mapping of signal keys to their rules.
        """
        table: dict[FormalityBranch, BranchRules] = getattr(self, language)
        if branch not in table:
            raise ValueError(f"There are no `{branch}` signals for `{language}`.")
        return table[branch]


@cache
def load_tuning_tables(tuning_file: Path | None = None) -> TuningTables:
    """
    Load and validate the tuning tables once per file.

    Args:
        tuning_file (Path | None, optional): TOML file with the tables. Falls back
            to the file from the configuration and then to the packaged tables.
            Defaults to None.

    Returns:
        TuningTables: Validated, immutable tables.
    """
    path = tuning_file or config.tuning_file or DEFAULT_TUNING_FILE
    with path.open("rb") as f:
        tables = TuningTables.model_validate(tomllib.load(f))
    logger.info(f"Loaded signal thresholds and weights from {path}.")
    return tables
