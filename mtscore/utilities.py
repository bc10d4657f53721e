from typing import List, Sequence

from mtscore.data_types import ReferenceSet, Sentence


def as_reference_set(references) -> ReferenceSet:
    """
    Allows passing a single reference sentence (a flat list of words) wherever a list of references is expected.
    An empty list is ambiguous and is read as an empty list of references, not as one empty reference sentence, so
    empty references have to be wrapped explicitly, e.g. [[]].
    """
    if references and isinstance(references[0], str):
        return [references]
    return references


def check_corpus_lengths(list_of_references: Sequence, hypotheses: Sequence[Sentence]):
    if len(list_of_references) != len(hypotheses):
        raise ValueError(f"The number of hypotheses and their reference(s) should be the same, but got "
                         f"{len(hypotheses)} hypotheses and {len(list_of_references)} reference sets.")


def transpose_references(list_of_references: Sequence[ReferenceSet]) -> List[List[Sentence]]:
    """
    Turns references grouped per hypothesis into reference streams, i.e. 'streams[j][i]' is the j-th reference of the
    i-th hypothesis. Hypotheses with fewer references leave None in the shorter streams.
    """
    num_streams = max((len(references) for references in list_of_references), default=0)
    streams = [[None] * len(list_of_references) for _ in range(num_streams)]
    for hypothesis_index, references in enumerate(list_of_references):
        for stream_index, reference in enumerate(references):
            streams[stream_index][hypothesis_index] = reference
    return streams
