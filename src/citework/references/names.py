"""Author name helpers shared by every citation style."""


def format_author_last_first(name: str) -> str:
    """Format a full name as 'Family, Given'.

    The last whitespace-separated token is the family name and everything
    before it the given name(s). Single-token names ("Madonna") are
    returned unchanged.
    """
    parts = name.split()
    if len(parts) <= 1:
        return name.strip()

    last_name = parts[-1]
    first_names = " ".join(parts[:-1])
    return f"{last_name}, {first_names}"


def last_name(name: str) -> str:
    """Extract the family name (last token), or "" for a blank name."""
    parts = name.split()
    return parts[-1] if parts else ""
