import io


def empty_readable_stream() -> io.BytesIO:
    """Return a fresh zero-length body for responses answered by the router."""
    return io.BytesIO(b"")
