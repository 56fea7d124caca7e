from collections.abc import Sequence

from zap.types import AppEntry


def query_tokens(query: str) -> list[str]:
    return query.lower().split()


def matches(entry: AppEntry, tokens: list[str]) -> bool:
    name = entry.name.lower()
    return all(token in name for token in tokens)


def filter_apps(entries: Sequence[AppEntry], query: str) -> Sequence[AppEntry]:
    """
    Keep the entries whose name contains every whitespace-separated
    token of the query, case-insensitively. Order is preserved.

    An empty query returns `entries` itself. A whitespace-only query
    has no tokens and therefore matches every entry.
    """
    if query == "":
        return entries

    tokens = query_tokens(query)
    return [entry for entry in entries if matches(entry, tokens)]
