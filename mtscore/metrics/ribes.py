import logging
import math
from typing import Sequence

from mtscore.constants import RIBES_ALPHA, RIBES_BETA
from mtscore.data_types import KendallStatistics, ReferenceSet, Sentence
from mtscore.metrics.ribes_statistics import RibesStatisticsCollector
from mtscore.ribes_alignment import align_hypothesis_to_reference
from mtscore.utilities import as_reference_set, check_corpus_lengths, transpose_references

logger = logging.getLogger(__name__)


def calculate_kendalls_tau(reference: Sentence, hypothesis: Sentence) -> KendallStatistics:
    """
    Computes the three factors of the RIBES score for one reference: the rank agreement of the word alignment (share of
    ascending pairs, i.e. the normalized Kendall's tau), the share of aligned hypothesis words and a brevity penalty.
    An empty hypothesis gives all zeros.
    """
    if not hypothesis:
        return KendallStatistics(tau=0.0, precision=0.0, brevity_penalty=0.0)

    brevity_penalty = min(1.0, math.exp(1.0 - len(reference) / len(hypothesis)))

    aligned_positions = align_hypothesis_to_reference(reference, hypothesis)
    num_aligned = len(aligned_positions)

    if num_aligned == 1 and len(reference) == 1:
        return KendallStatistics(tau=1.0, precision=1.0 / len(hypothesis), brevity_penalty=brevity_penalty)
    if num_aligned < 2:
        return KendallStatistics(tau=0.0, precision=0.0, brevity_penalty=brevity_penalty)

    num_ascending_pairs = 0
    for index, position in enumerate(aligned_positions[:-1]):
        num_ascending_pairs += sum(1 for later_position in aligned_positions[index + 1:] if position < later_position)

    tau = num_ascending_pairs / (num_aligned * (num_aligned - 1) / 2.0)
    precision = num_aligned / len(hypothesis)

    return KendallStatistics(tau=tau, precision=precision, brevity_penalty=brevity_penalty)


def sentence_ribes(reference: Sentence, hypothesis: Sentence, alpha: float = RIBES_ALPHA,
                   beta: float = RIBES_BETA) -> float:
    statistics = calculate_kendalls_tau(reference, hypothesis)
    return statistics.tau * statistics.precision ** alpha * statistics.brevity_penalty ** beta


def corpus_ribes(list_of_references: Sequence[ReferenceSet], hypotheses: Sequence[Sentence],
                 alpha: float = RIBES_ALPHA, beta: float = RIBES_BETA,
                 statistics_collector: RibesStatisticsCollector = None) -> float:
    """
    Corpus-level RIBES: every hypothesis is scored against each of its references and the best score is kept. The
    corpus score is the average of these best scores over all hypotheses having at least one reference.
    """
    check_corpus_lengths(list_of_references, hypotheses)

    reference_streams = transpose_references([as_reference_set(references) for references in list_of_references])

    if statistics_collector is None:
        statistics_collector = RibesStatisticsCollector()

    best_score_sum = 0.0
    num_valid_sentences = 0

    for hypothesis_index, hypothesis in enumerate(hypotheses):
        best_score = -1.0

        for reference_stream in reference_streams:
            reference = reference_stream[hypothesis_index]
            if reference is None:
                continue

            try:
                score = sentence_ribes(reference, hypothesis, alpha=alpha, beta=beta)
            except Exception:
                logger.error("Error in reference line %d", hypothesis_index)
                raise

            best_score = max(best_score, score)

        if best_score > -1.0:
            num_valid_sentences += 1
            best_score_sum += best_score
            statistics_collector.add_sentence_score(best_score)
        else:
            statistics_collector.add_sentence_score(None)

    return best_score_sum / num_valid_sentences if num_valid_sentences else 0.0
