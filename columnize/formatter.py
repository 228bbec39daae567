from columnize.settings import Justification


# ——— Utilities ——————————————————————————————————————
def is_number(text: str) -> bool:
    if "_" in text:
        return False  # float() takes digit separators, plain decimal notation does not
    try:
        float(text)
    except ValueError:
        return False
    return True


def justify(field: str, width: int, right: bool) -> str:
    # numbers go right, so their most significant digits line up
    return field.rjust(width) if right else field.ljust(width)


def align_right(field: str, justification: Justification) -> bool:
    if justification is Justification.AUTO:
        return is_number(field)
    return justification is Justification.RIGHT


def format_fields(fields: list[str], widths: list[int], right: list[bool], delimiter: str) -> str:
    """Pad each field to its column width and join them, ending with a newline."""
    return delimiter.join(justify(field, widths[i], right[i]) for i, field in enumerate(fields)) + "\n"
