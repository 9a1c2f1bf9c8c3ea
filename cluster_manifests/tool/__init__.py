"""Command line tool for creating and inspecting cluster manifests."""
