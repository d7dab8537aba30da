"""Split text into newline-terminated lines."""


def _split_lines(text: str) -> list[str]:
    """Split text into lines, keeping each line's trailing newline.

    The last line has no newline when the text does not end with one.
    Empty text has no lines.
    """
    if not text:
        return []
    lines = [line + "\n" for line in text.split("\n")]
    if text.endswith("\n"):
        lines.pop()
    else:
        lines[-1] = lines[-1][:-1]
    return lines
