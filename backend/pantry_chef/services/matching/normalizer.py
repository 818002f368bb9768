"""Term normalization shared by every matching step."""


def normalize(term: str) -> str:
    return term.strip().lower()


def singularize(term: str) -> str:
    """
    Crude plural reduction: drop one trailing "s" after normalizing.
    Words that merely end in "s" are cut too ("molasses" -> "molasse"); the
    substitution table is keyed against this behaviour. Single characters are kept.
    """
    norm = normalize(term)
    if len(norm) > 1 and norm.endswith("s"):
        return norm[:-1]
    return norm
