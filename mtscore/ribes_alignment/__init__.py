from mtscore.ribes_alignment.word_alignment import align_hypothesis_to_reference
