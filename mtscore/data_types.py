from dataclasses import dataclass
from typing import Sequence

Token = str
Sentence = Sequence[Token]
ReferenceSet = Sequence[Sentence]
Weights = Sequence[float]


@dataclass(frozen=True)
class Fraction:
    """
    Clipped n-gram precision as a (numerator, denominator) pair. Kept unreduced, corpus BLEU sums the raw numerators
    and denominators over all sentences.
    """
    numerator: int
    denominator: int

    def __post_init__(self):
        if self.denominator == 0:
            raise ValueError("Denominator cannot be zero.")

    @property
    def value(self) -> float:
        return self.numerator / self.denominator

    def __float__(self):
        return self.value

    def is_zero(self) -> bool:
        return self.numerator == 0


@dataclass(frozen=True)
class KendallStatistics:
    tau: float  # fraction of ascending pairs in the alignment, not the classical Kendall tau
    precision: float  # number of aligned hypothesis words / hypothesis length
    brevity_penalty: float

