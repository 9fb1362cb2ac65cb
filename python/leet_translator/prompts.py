from leet_translator.schemas import TranslateMode

FROM_LEET_TEMPLATE = (
    "You are an expert in internet slang. Translate the following leet speak (1337 speak) "
    "into natural English, inferring the context. Return only the translation.\n"
    "\n"
    "Leet speak: \"{text}\"\n"
    "English translation:"
)

TO_LEET_TEMPLATE = (
    "You are an expert in internet slang. Translate the following English text into leet speak (1337 speak). "
    "Use both character substitutions (e.g. \"e\" -> \"3\", \"a\" -> \"4\", \"t\" -> \"7\") "
    "and leet slang substitutions (e.g. \"owned\" -> \"pwned\", \"elite\" -> \"1337\"). "
    "Return only the translation.\n"
    "\n"
    "English: \"{text}\"\n"
    "Leet speak:"
)

TEMPLATES = {
    TranslateMode.FROM_LEET: FROM_LEET_TEMPLATE,
    TranslateMode.TO_LEET: TO_LEET_TEMPLATE,
}

def build_prompt(text: str, mode: TranslateMode = TranslateMode.FROM_LEET) -> str:
    # text goes in verbatim; format() does not parse braces inside arguments
    return TEMPLATES[TranslateMode(mode)].format(text=text)
