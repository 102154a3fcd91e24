"""vcsauth: pick the stored account that authenticates a request to a code-hosting server."""
