from collections import Counter

from mtscore.data_types import Fraction, ReferenceSet, Sentence
from mtscore.utilities import as_reference_set


def extract_ngrams(sentence: Sentence, n: int) -> Counter:
    """
    Counts all n-grams of the sentence. N-grams are tuples of n consecutive words, sentences shorter than n yield an
    empty Counter.
    """
    if n < 1:
        raise ValueError(f"N-gram order must be at least 1, got {n}.")

    words = tuple(sentence)
    return Counter(words[start:start + n] for start in range(len(words) - n + 1))


def modified_precision(references: ReferenceSet, hypothesis: Sentence, n: int) -> Fraction:
    """
    Clipped n-gram precision as defined for BLEU (Papineni et al. 2002). The count of each hypothesis n-gram is clipped
    to the maximum number of times it occurs in any single reference. The denominator is the number of hypothesis
    n-grams, but at least 1, such that orders exceeding the hypothesis length score 0 instead of being undefined.
    """
    references = as_reference_set(references)
    counts = extract_ngrams(hypothesis, n)

    max_counts = Counter()
    for reference in references:
        reference_counts = extract_ngrams(reference, n)
        for ngram in counts:
            max_counts[ngram] = max(max_counts[ngram], reference_counts[ngram])

    clipped_counts = {ngram: min(count, max_counts[ngram]) for ngram, count in counts.items()}

    numerator = sum(clipped_counts.values())
    denominator = max(1, sum(counts.values()))

    return Fraction(numerator, denominator)
