def render_count_prompt(count_text, width):
    """Last-row echo of the digits typed so far; blank-padded to ``width``."""
    if width <= 0:
        return ""
    return str(count_text or "").ljust(width)[:width]
