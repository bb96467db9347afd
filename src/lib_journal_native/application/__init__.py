"""Application layer: ports and use cases for journal delivery."""
