from tcgsearch.pipeline.pokemontcg import (
    Card,
    SearchParams,
    SearchResult,
    build_request,
    do_request,
    process_data,
    render_result,
    search_cards,
)

__all__ = [
    "Card",
    "SearchParams",
    "SearchResult",
    "build_request",
    "do_request",
    "process_data",
    "render_result",
    "search_cards",
]
