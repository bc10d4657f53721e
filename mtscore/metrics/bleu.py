import logging
import math
from typing import List, Optional, Sequence

from mtscore.constants import DEFAULT_BLEU_WEIGHTS
from mtscore.data_types import ReferenceSet, Sentence, Weights
from mtscore.metrics.bleu_statistics import BleuStatistics
from mtscore.metrics.brevity_penalty import brevity_penalty, closest_ref_length
from mtscore.metrics.ngram_statistics import modified_precision
from mtscore.utilities import as_reference_set, check_corpus_lengths

__all__ = ["sentence_bleu", "corpus_bleu", "corpus_bleu_multiple_weights", "closest_ref_length", "brevity_penalty"]

logger = logging.getLogger(__name__)


def sentence_bleu(references: ReferenceSet, hypothesis: Sentence, weights: Weights = DEFAULT_BLEU_WEIGHTS) -> float:
    """
    BLEU score of a single hypothesis against one or more references, without smoothing: if any n-gram order up to
    len(weights) has no match, the score is 0.0. 'references' may also be a single reference sentence.
    """
    references = as_reference_set(references)

    precisions = [modified_precision(references, hypothesis, order) for order in range(1, len(weights) + 1)]

    zero_orders = [order for order, precision in enumerate(precisions, start=1)
                   if precision.is_zero() or math.isnan(precision.value)]
    if zero_orders:
        logger.warning(
            "The hypothesis contains 0 counts of %d-gram overlaps. Therefore the BLEU score evaluates to 0, "
            "independently of how many n-gram overlaps of lower order it contains.", zero_orders[0])
        score = 0.0
    else:
        score = math.exp(sum(weight * math.log(precision.value) for weight, precision in zip(weights, precisions)))

    closest_reference_length = closest_ref_length(references, len(hypothesis))

    return brevity_penalty(closest_reference_length, len(hypothesis)) * score


def corpus_bleu(list_of_references: Sequence[ReferenceSet], hypotheses: Sequence[Sentence],
                weights: Weights = DEFAULT_BLEU_WEIGHTS) -> float:
    """
    Corpus-level BLEU. Numerators and denominators of the modified precisions are summed over all sentences before
    dividing, this is not the average of sentence BLEU scores. The brevity penalty is computed from the summed
    hypothesis lengths and summed closest reference lengths.

    Each element of 'list_of_references' is a list of references or a single reference sentence. An empty reference
    sentence has to be given as [[]], a bare [] means no references and raises ValueError.
    """
    return _collect_statistics(list_of_references, hypotheses, max_order=len(weights)).score(weights)


def corpus_bleu_multiple_weights(list_of_references: Sequence[ReferenceSet], hypotheses: Sequence[Sentence],
                                 weight_sets: Optional[Sequence[Weights]] = None) -> List[float]:
    """
    Computes one corpus BLEU score per weight vector. The n-gram statistics are collected only once, up to the highest
    order used by any of the weight vectors.
    """
    if weight_sets is None:
        weight_sets = [DEFAULT_BLEU_WEIGHTS]
    if not weight_sets:
        return []

    max_order = max(len(weights) for weights in weight_sets)
    statistics = _collect_statistics(list_of_references, hypotheses, max_order=max_order)

    return [statistics.score(weights) for weights in weight_sets]


def _collect_statistics(list_of_references: Sequence[ReferenceSet], hypotheses: Sequence[Sentence],
                        max_order: int) -> BleuStatistics:
    check_corpus_lengths(list_of_references, hypotheses)

    statistics = BleuStatistics(max_order=max_order)
    for references, hypothesis in zip(list_of_references, hypotheses):
        statistics.add_sentence(as_reference_set(references), hypothesis)

    logger.debug("Collected BLEU statistics: %s", dict(statistics.get_statistics()))

    return statistics
