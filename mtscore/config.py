from pathlib import Path
from typing import List, Optional, Sequence, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from mtscore.constants import DEFAULT_BLEU_WEIGHTS, RIBES_ALPHA, RIBES_BETA
from mtscore.data_types import ReferenceSet, Sentence
from mtscore.metrics.bleu import corpus_bleu, corpus_bleu_multiple_weights, sentence_bleu
from mtscore.metrics.ribes import corpus_ribes, sentence_ribes
from mtscore.metrics.ribes_statistics import RibesStatisticsCollector


def _check_weights(weights: List[float]) -> List[float]:
    if not weights:
        raise ValueError("Weights must contain at least one n-gram order")
    if any(weight < 0 for weight in weights):
        raise ValueError(f"Weights must be non-negative, got {weights}")
    return weights


class BleuConfig(BaseModel):
    """BLEU configuration"""
    weights: List[float] = Field(
        default=list(DEFAULT_BLEU_WEIGHTS),
        description="Weight of each n-gram order, the number of weights is the maximum n-gram order"
    )
    weight_sets: Optional[List[List[float]]] = Field(
        default=None,
        description="Several weight vectors to score a corpus with at once"
    )

    @field_validator('weights')
    def validate_weights(cls, v):
        """Validate weight vector"""
        return _check_weights(v)

    @field_validator('weight_sets')
    def validate_weight_sets(cls, v):
        """Validate every weight vector"""
        if v is not None:
            for weights in v:
                _check_weights(weights)
        return v


class RibesConfig(BaseModel):
    """RIBES configuration"""
    alpha: float = Field(
        default=RIBES_ALPHA,
        ge=0.0,
        description="Exponent of the word precision term"
    )
    beta: float = Field(
        default=RIBES_BETA,
        ge=0.0,
        description="Exponent of the brevity penalty term"
    )


class ScoringConfig(BaseModel):
    """Main scoring configuration class"""
    bleu: BleuConfig = Field(
        default_factory=BleuConfig,
        description="BLEU configuration"
    )
    ribes: RibesConfig = Field(
        default_factory=RibesConfig,
        description="RIBES configuration"
    )

    @classmethod
    def from_yaml_file(cls, file_path: Union[str, Path]) -> 'ScoringConfig':
        """Load configuration from YAML file"""
        with open(file_path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f)
        return cls(**(config_dict or {}))

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return self.model_dump()

    def to_yaml(self) -> str:
        """Convert to YAML format string"""
        return yaml.dump(self.model_dump(), default_flow_style=False, allow_unicode=True)


class Scorer:
    """
    Scores sentences and corpora with the weights and exponents of one ScoringConfig.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def sentence_bleu(self, references: ReferenceSet, hypothesis: Sentence) -> float:
        return sentence_bleu(references, hypothesis, weights=self.config.bleu.weights)

    def corpus_bleu(self, list_of_references: Sequence[ReferenceSet], hypotheses: Sequence[Sentence]) -> float:
        return corpus_bleu(list_of_references, hypotheses, weights=self.config.bleu.weights)

    def corpus_bleu_multiple_weights(self, list_of_references: Sequence[ReferenceSet],
                                     hypotheses: Sequence[Sentence]) -> List[float]:
        weight_sets = self.config.bleu.weight_sets or [self.config.bleu.weights]
        return corpus_bleu_multiple_weights(list_of_references, hypotheses, weight_sets=weight_sets)

    def sentence_ribes(self, reference: Sentence, hypothesis: Sentence) -> float:
        return sentence_ribes(reference, hypothesis, alpha=self.config.ribes.alpha, beta=self.config.ribes.beta)

    def corpus_ribes(self, list_of_references: Sequence[ReferenceSet], hypotheses: Sequence[Sentence],
                     statistics_collector: RibesStatisticsCollector = None) -> float:
        return corpus_ribes(list_of_references, hypotheses, alpha=self.config.ribes.alpha,
                            beta=self.config.ribes.beta, statistics_collector=statistics_collector)


# Convenience functions
def load_scoring_config(config_path: Union[str, Path]) -> ScoringConfig:
    """Convenience function to load scoring configuration"""
    return ScoringConfig.from_yaml_file(config_path)


def validate_scoring_config(config_dict: dict) -> ScoringConfig:
    """Validate configuration dictionary and return ScoringConfig instance"""
    return ScoringConfig(**config_dict)
