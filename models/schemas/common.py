PROFANE_WORDS = ("Kerfuffle", "Sharbert", "Fornax")
CENSORED = "****"


def replace_profane(text: str) -> str:
    """
    Censor the profane words, either capitalized as listed or all lowercase.
    Plain substring replacement: "kerfuffles" becomes "****s", "KERFUFFLE" is untouched.
    """
    for word in PROFANE_WORDS:
        text = text.replace(word, CENSORED)
        text = text.replace(word.lower(), CENSORED)
    return text
