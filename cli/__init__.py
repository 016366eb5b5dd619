"""shardwatch command-line interface."""
