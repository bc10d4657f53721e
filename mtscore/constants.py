DEFAULT_BLEU_WEIGHTS = (0.25, 0.25, 0.25, 0.25)

# Exponents of the precision and brevity penalty terms in the RIBES formula.
RIBES_ALPHA = 0.25
RIBES_BETA = 0.10

# Words are mapped to single characters starting at this code point (CJK Unified Ideographs) for substring search.
SYMBOL_CODE_POINT_OFFSET = 0x4E00
