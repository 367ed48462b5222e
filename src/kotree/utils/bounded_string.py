MAX_STRING_LEN = 128


# Copies at most MAX_STRING_LEN characters. Longer input is truncated silently.
def make_string(raw: str) -> str:
    return raw[:MAX_STRING_LEN]
