from collections import OrderedDict
from typing import Any, Dict, List, Optional


class RibesStatisticsCollector:
    """
    Keeps the best RIBES score of every hypothesis seen by corpus_ribes(). Sentences without any reference are
    recorded as None and do not count towards the corpus average.
    """

    def __init__(self):
        self._sentence_scores: List[Optional[float]] = []

    def add_sentence_score(self, best_score: Optional[float]):
        self._sentence_scores.append(best_score)

    def merge(self, other: "RibesStatisticsCollector") -> "RibesStatisticsCollector":
        """
        Appends the scores of 'other', e.g. when the corpus was scored in several parts. The corpus score is then
        averaged over the valid sentences of all parts, not over the averages of the parts.
        """
        self._sentence_scores.extend(other._sentence_scores)
        return self

    @property
    def sentence_scores(self) -> List[Optional[float]]:
        return list(self._sentence_scores)

    def corpus_score(self) -> float:
        valid_scores = [score for score in self._sentence_scores if score is not None]
        if not valid_scores:
            return 0.0
        return sum(valid_scores) / len(valid_scores)

    def get_statistics(self) -> Dict[str, Any]:
        num_valid_sentences = sum(1 for score in self._sentence_scores if score is not None)
        return OrderedDict(
            num_sentences=len(self._sentence_scores),
            num_valid_sentences=num_valid_sentences,
            corpus_score=self.corpus_score(),
        )
