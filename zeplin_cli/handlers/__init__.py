"""Command handlers, one module per `screen` subcommand."""
