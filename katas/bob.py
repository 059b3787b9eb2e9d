"""Bob, a lackadaisical teenager."""


def is_yelling(message: str) -> bool:
    """Whether the message has letters and all of them are upper case."""
    return any(c.isalpha() for c in message) and message.upper() == message


def reply(message: str) -> str:
    """Bob's answer to ``message``."""
    text = message.strip()
    if not text:
        return "Fine. Be that way!"
    question = text.endswith("?")
    if is_yelling(text):
        return "Calm down, I know what I'm doing!" if question else "Whoa, chill out!"
    if question:
        return "Sure."
    return "Whatever."