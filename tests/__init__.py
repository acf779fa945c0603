"""Tests for nullpipe."""
