from mtscore.data_types import Fraction, KendallStatistics
from mtscore.metrics.ngram_statistics import extract_ngrams, modified_precision
from mtscore.metrics.bleu import (
    brevity_penalty, closest_ref_length, corpus_bleu, corpus_bleu_multiple_weights, sentence_bleu)
from mtscore.metrics.bleu_statistics import BleuStatistics
from mtscore.metrics.ribes import calculate_kendalls_tau, corpus_ribes, sentence_ribes
from mtscore.metrics.ribes_statistics import RibesStatisticsCollector
from mtscore.ribes_alignment import align_hypothesis_to_reference
from mtscore.config import ScoringConfig, Scorer, load_scoring_config

__version__ = "0.1.0"
