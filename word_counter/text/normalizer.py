# word_counter/text/normalizer.py


def normalize_word(token: str) -> str:
    """Lower-case a token and join contractions ("Don't" -> "dont")."""
    if not token:
        return ""
    return token.replace("'", "").lower()
