"""Read helpers over Protean query sets."""

PAGE_SIZE = 500


def fetch_all(query, page_size: int | None = None) -> list:
    """Every record ``query`` matches, fetched a page at a time.

    Pages are cut on the unique ``id`` so they neither overlap nor skip
    records; callers sort the result themselves.
    """
    page_size = page_size or PAGE_SIZE
    query = query.order_by("id")
    records = []
    while True:
        page = query.offset(len(records)).limit(page_size).all().items
        records.extend(page)
        if len(page) < page_size:
            return records
