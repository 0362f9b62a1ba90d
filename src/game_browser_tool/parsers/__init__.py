"""HTML parsers turning page snapshots into game facts."""
