"""Application layer: ports and the invocation use case."""
