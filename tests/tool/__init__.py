"""Tests for the cluster-manifests command line tool."""
