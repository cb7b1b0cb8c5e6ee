"""Resolution runtime: configuration context, descriptor resolver, pipeline API."""
