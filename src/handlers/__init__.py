"""Lambda handlers; handlers.main is the deployed entrypoint."""
