import math

from mtscore.data_types import ReferenceSet


def closest_ref_length(references: ReferenceSet, hypothesis_length: int) -> int:
    """
    Returns the reference length closest to the hypothesis length. If several references are equally close, the one
    coming first in the given reference order wins.
    """
    if not references:
        raise ValueError("Need at least one reference to determine the closest reference length.")

    # min() returns the first minimal element.
    return min((len(reference) for reference in references),
               key=lambda reference_length: abs(reference_length - hypothesis_length))


def brevity_penalty(closest_reference_length: int, hypothesis_length: int) -> float:
    if hypothesis_length > closest_reference_length:
        return 1.0
    # An empty hypothesis gets a brevity penalty of 0, and therefore a BLEU score of 0.
    if hypothesis_length == 0:
        return 0.0
    return math.exp(1 - closest_reference_length / hypothesis_length)
