import logging
from collections import Counter
from typing import Dict, List, Tuple

from mtscore.constants import SYMBOL_CODE_POINT_OFFSET
from mtscore.data_types import Sentence

logger = logging.getLogger(__name__)


def align_hypothesis_to_reference(reference: Sentence, hypothesis: Sentence) -> List[int]:
    """
    Aligns each hypothesis word to a position in the reference, as done for RIBES (Isozaki et al. 2010). Words that
    occur exactly once in both sentences are aligned directly. Ambiguous words are disambiguated by growing a context
    window to the left or right of the word until the resulting n-gram occurs exactly once in both reference and
    hypothesis.

    Returns the reference positions in hypothesis order. Words missing in the reference or without any unique context
    get no entry, so the result may be shorter than the hypothesis.
    """
    reference_string, hypothesis_string = map_words_to_characters(reference, hypothesis)

    reference_word_counts = Counter(reference)
    hypothesis_word_counts = Counter(hypothesis)
    first_reference_positions = {}
    for position, word in enumerate(reference):
        first_reference_positions.setdefault(word, position)

    hypothesis_length = len(hypothesis)
    aligned_positions = []

    for position, word in enumerate(hypothesis):
        if word not in reference_word_counts:
            continue

        if reference_word_counts[word] == 1 and hypothesis_word_counts[word] == 1:
            aligned_positions.append(first_reference_positions[word])
            continue

        aligned_position = _align_ambiguous_word(position, reference_string, hypothesis_string, hypothesis_length)
        if aligned_position is None:
            # Dropped words lower the RIBES precision term.
            logger.debug("Could not find a unique context for hypothesis word %d ('%s'), leaving it unaligned.",
                         position, word)
            continue

        aligned_positions.append(aligned_position)

    return aligned_positions


def _align_ambiguous_word(position: int, reference_string: str, hypothesis_string: str, hypothesis_length: int):
    for window in range(1, max(position + 1, hypothesis_length - position) + 1):
        if window <= position:
            # Left context, the word is the last character of the n-gram.
            ngram = hypothesis_string[position - window:position + 1]
            if _is_unique_in_both(ngram, reference_string, hypothesis_string):
                return reference_string.index(ngram) + window

        if position + window < hypothesis_length:
            # Right context, the word is the first character of the n-gram.
            ngram = hypothesis_string[position:position + window + 1]
            if _is_unique_in_both(ngram, reference_string, hypothesis_string):
                return reference_string.index(ngram)

    return None


def _is_unique_in_both(ngram: str, reference_string: str, hypothesis_string: str) -> bool:
    return (count_overlapping_occurrences(ngram, reference_string) == 1
            and count_overlapping_occurrences(ngram, hypothesis_string) == 1)


def count_overlapping_occurrences(pattern: str, text: str) -> int:
    """
    Counts occurrences of 'pattern' in 'text', including overlapping ones, e.g. "aa" occurs twice in "aaa".
    """
    if not pattern:
        return 0

    count = 0
    cursor = text.find(pattern)
    while cursor != -1:
        count += 1
        cursor = text.find(pattern, cursor + 1)
    return count


def map_words_to_characters(reference: Sentence, hypothesis: Sentence) -> Tuple[str, str]:
    """
    Substring search works on strings, not lists of words. Therefore each distinct word is mapped to one character,
    such that a span of words becomes a substring. Words are numbered in order of first occurrence, reference first.
    """
    vocabulary: Dict[str, int] = {}
    for word in list(reference) + list(hypothesis):
        vocabulary.setdefault(word, len(vocabulary))

    reference_string = "".join(chr(vocabulary[word] + SYMBOL_CODE_POINT_OFFSET) for word in reference)
    hypothesis_string = "".join(chr(vocabulary[word] + SYMBOL_CODE_POINT_OFFSET) for word in hypothesis)

    return reference_string, hypothesis_string
