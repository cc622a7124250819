"""Test suite for pojito."""
