import logging
import math
from collections import OrderedDict
from typing import Any, Dict

from mtscore.data_types import ReferenceSet, Sentence, Weights
from mtscore.metrics.brevity_penalty import brevity_penalty, closest_ref_length
from mtscore.metrics.ngram_statistics import modified_precision
from mtscore.utilities import as_reference_set

logger = logging.getLogger(__name__)


class BleuStatistics:
    """
    Collects the sufficient statistics for corpus BLEU: per n-gram order the summed numerators and denominators of the
    modified precisions, and the summed hypothesis and closest reference lengths. None of these depend on the weights,
    so one collector can be scored with any number of weight vectors. All fields are integer sums, collectors built on
    different parts of a corpus can be merged in any order without changing the score.
    """

    def __init__(self, max_order: int = 4):
        if max_order < 1:
            raise ValueError(f"Maximum n-gram order must be at least 1, got {max_order}.")

        self.max_order = max_order
        self._numerators = [0] * max_order
        self._denominators = [0] * max_order
        self._hypothesis_length = 0
        self._reference_length = 0
        self._num_sentences = 0

    def add_sentence(self, references: ReferenceSet, hypothesis: Sentence):
        references = as_reference_set(references)

        for order in range(1, self.max_order + 1):
            precision = modified_precision(references, hypothesis, order)
            self._numerators[order - 1] += precision.numerator
            self._denominators[order - 1] += precision.denominator

        self._reference_length += closest_ref_length(references, len(hypothesis))
        self._hypothesis_length += len(hypothesis)
        self._num_sentences += 1

    def merge(self, other: "BleuStatistics") -> "BleuStatistics":
        if other.max_order != self.max_order:
            raise ValueError(f"Cannot merge BLEU statistics of maximum order {other.max_order} into statistics of "
                             f"maximum order {self.max_order}.")

        for index in range(self.max_order):
            self._numerators[index] += other._numerators[index]
            self._denominators[index] += other._denominators[index]
        self._hypothesis_length += other._hypothesis_length
        self._reference_length += other._reference_length
        self._num_sentences += other._num_sentences
        return self

    def score(self, weights: Weights) -> float:
        """
        Weighted geometric mean of the corpus precisions times the corpus brevity penalty. Orders with a zero
        denominator sum or a zero weight are skipped. A weighted order without any matching n-gram gives 0.0.
        """
        if len(weights) > self.max_order:
            raise ValueError(f"Got {len(weights)} weights but statistics were only collected up to order "
                             f"{self.max_order}.")

        log_score = 0.0
        for index, weight in enumerate(weights):
            if self._denominators[index] == 0 or weight == 0:
                continue
            if self._numerators[index] == 0:
                logger.debug("No matching %d-grams in the corpus, BLEU is 0.", index + 1)
                return 0.0
            log_score += weight * math.log(self._numerators[index] / self._denominators[index])

        return brevity_penalty(self._reference_length, self._hypothesis_length) * math.exp(log_score)

    def get_statistics(self) -> Dict[str, Any]:
        return OrderedDict(
            num_sentences=self._num_sentences,
            hypothesis_length=self._hypothesis_length,
            reference_length=self._reference_length,
            numerators=list(self._numerators),
            denominators=list(self._denominators),
        )
