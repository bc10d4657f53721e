import math
import unittest

from mtscore.data_types import KendallStatistics
from mtscore.metrics.ribes import calculate_kendalls_tau, corpus_ribes, sentence_ribes
from mtscore.metrics.ribes_statistics import RibesStatisticsCollector
from .utilities import HYPOTHESIS_1, HYPOTHESIS_3, REFERENCE_1A, REFERENCE_1B, REFERENCE_3A


class KendallsTauTest(unittest.TestCase):

    def test_identical_sentences(self):
        sentence = "the cat sat on a mat".split()

        statistics = calculate_kendalls_tau(sentence, sentence)

        self.assertEqual(statistics, KendallStatistics(tau=1.0, precision=1.0, brevity_penalty=1.0))
        self.assertAlmostEqual(sentence_ribes(sentence, sentence), 1.0)

    def test_identical_sentences_with_repeated_words(self):
        statistics = calculate_kendalls_tau(REFERENCE_1B, REFERENCE_1B)

        self.assertAlmostEqual(statistics.tau, 1.0)
        self.assertAlmostEqual(statistics.precision, 1.0)
        self.assertAlmostEqual(sentence_ribes(REFERENCE_1B, REFERENCE_1B), statistics.brevity_penalty ** 0.10)

    def test_reversed_word_order(self):
        statistics = calculate_kendalls_tau("a b c d".split(), "d c b a".split())

        self.assertEqual(statistics.tau, 0.0)
        self.assertEqual(statistics.precision, 1.0)
        self.assertEqual(sentence_ribes("a b c d".split(), "d c b a".split()), 0.0)

    def test_swapped_clauses(self):
        # Alignment is [7, 8, 9, 10, 6, 7, 1, 2, 3, 4, 5], 17 of 55 pairs are ascending.
        statistics = calculate_kendalls_tau(REFERENCE_3A, HYPOTHESIS_3)

        self.assertAlmostEqual(statistics.tau, 17 / 55)
        self.assertAlmostEqual(statistics.precision, 1.0)
        self.assertAlmostEqual(statistics.brevity_penalty, 1.0)
        self.assertAlmostEqual(sentence_ribes(REFERENCE_3A, HYPOTHESIS_3), 17 / 55)

    def test_short_hypothesis(self):
        statistics = calculate_kendalls_tau("a b c d e f".split(), "a b c".split())

        self.assertAlmostEqual(statistics.brevity_penalty, math.exp(-1))
        self.assertAlmostEqual(sentence_ribes("a b c d e f".split(), "a b c".split()), math.exp(-0.1))

    def test_brevity_penalty_capped_at_one(self):
        statistics = calculate_kendalls_tau("a b".split(), "a b c d".split())

        self.assertEqual(statistics.brevity_penalty, 1.0)
        self.assertAlmostEqual(statistics.precision, 0.5)

    def test_single_word_reference(self):
        statistics = calculate_kendalls_tau(["hello"], ["hello", "world"])

        self.assertEqual(statistics.tau, 1.0)
        self.assertAlmostEqual(statistics.precision, 0.5)
        self.assertAlmostEqual(sentence_ribes(["hello"], ["hello", "world"]), 0.5 ** 0.25)

    def test_less_than_two_aligned_words(self):
        statistics = calculate_kendalls_tau(["hello", "there"], ["hello", "world"])

        self.assertEqual(statistics, KendallStatistics(tau=0.0, precision=0.0, brevity_penalty=1.0))

    def test_unaligned_words(self):
        # Neither word has a unique context, both are dropped.
        statistics = calculate_kendalls_tau("a b a b".split(), "a b".split())

        self.assertEqual(statistics.tau, 0.0)
        self.assertEqual(statistics.precision, 0.0)
        self.assertAlmostEqual(statistics.brevity_penalty, math.exp(-1))

    def test_empty_hypothesis(self):
        statistics = calculate_kendalls_tau(["a", "b"], [])

        self.assertEqual(statistics, KendallStatistics(tau=0.0, precision=0.0, brevity_penalty=0.0))
        self.assertEqual(sentence_ribes(["a", "b"], []), 0.0)

    def test_custom_exponents(self):
        score = sentence_ribes(["hello"], ["hello", "world"], alpha=1.0, beta=0.0)

        self.assertAlmostEqual(score, 0.5)


class CorpusRibesTest(unittest.TestCase):

    def test_best_reference_is_used(self):
        hypothesis = "a b c d".split()
        list_of_references = [["d c b a".split(), "a b c d".split()], [REFERENCE_3A]]

        score = corpus_ribes(list_of_references, [hypothesis, HYPOTHESIS_3])

        self.assertAlmostEqual(score, (1.0 + 17 / 55) / 2)

    def test_single_reference_sentences(self):
        score = corpus_ribes([REFERENCE_3A], [HYPOTHESIS_3])

        self.assertAlmostEqual(score, 17 / 55)

    def test_hypothesis_without_references(self):
        statistics_collector = RibesStatisticsCollector()

        score = corpus_ribes([["a b c d".split()], []], ["a b c d".split(), ["x"]],
                             statistics_collector=statistics_collector)

        self.assertAlmostEqual(score, 1.0)
        self.assertEqual(statistics_collector.sentence_scores, [1.0, None])

        statistics = statistics_collector.get_statistics()
        self.assertEqual(statistics["num_sentences"], 2)
        self.assertEqual(statistics["num_valid_sentences"], 1)
        self.assertAlmostEqual(statistics["corpus_score"], 1.0)

    def test_no_valid_sentences(self):
        self.assertEqual(corpus_ribes([[], []], [["a"], ["b"]]), 0.0)
        self.assertEqual(corpus_ribes([], []), 0.0)

    def test_mismatched_number_of_sentences(self):
        with self.assertRaises(ValueError):
            corpus_ribes([[REFERENCE_3A]], [HYPOTHESIS_3, HYPOTHESIS_1])

    def test_merge_statistics(self):
        list_of_references = [[REFERENCE_1A, REFERENCE_1B], [REFERENCE_3A], [], ["a b c d".split()]]
        hypotheses = [HYPOTHESIS_1, HYPOTHESIS_3, ["x"], "a c b d".split()]

        first_part = RibesStatisticsCollector()
        corpus_ribes(list_of_references[:2], hypotheses[:2], statistics_collector=first_part)
        second_part = RibesStatisticsCollector()
        corpus_ribes(list_of_references[2:], hypotheses[2:], statistics_collector=second_part)

        merged = first_part.merge(second_part)

        self.assertEqual(len(merged.sentence_scores), 4)
        self.assertAlmostEqual(merged.corpus_score(), corpus_ribes(list_of_references, hypotheses))


if __name__ == '__main__':
    unittest.main()
