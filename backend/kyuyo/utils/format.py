def format_number_with_commas(num) -> str:
    """``326767`` -> ``"326,767"``."""
    return f"{num:,}"
